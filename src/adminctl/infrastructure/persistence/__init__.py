"""Persistence layer: engine management, ORM models and repositories."""
