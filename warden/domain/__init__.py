"""Domain layer: entities, enums, errors, protocols (ports) and types."""
