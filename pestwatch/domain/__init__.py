"""Domain layer: entities, rules, use cases and repository interfaces."""
