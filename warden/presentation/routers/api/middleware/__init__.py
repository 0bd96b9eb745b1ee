"""Request middleware and authentication dependencies."""
