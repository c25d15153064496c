"""Domain layer: identifier value objects, grammars, exceptions and services."""
