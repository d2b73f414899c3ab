"""Domain layer - entities and services with no infrastructure dependencies."""
