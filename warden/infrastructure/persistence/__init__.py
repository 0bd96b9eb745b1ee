"""Persistence infrastructure: SQLAlchemy models, repositories and in-memory adapters."""
