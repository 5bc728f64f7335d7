"""Domain layer: entities, ports and errors. No infrastructure imports."""
