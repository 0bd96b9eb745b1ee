"""Queries (read operations) of the credential engine."""

from warden.application.queries.user_queries import GetProfile

__all__ = ["GetProfile"]
