"""Application layer: commands, queries, handlers and engine services."""
