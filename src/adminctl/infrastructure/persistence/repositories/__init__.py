"""Persistence repositories for database operations."""

from adminctl.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "UserRepository",
]
