"""Domain layer - entities, value objects and the query engine."""
