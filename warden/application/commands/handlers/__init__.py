"""Command handlers (one per engine operation)."""
