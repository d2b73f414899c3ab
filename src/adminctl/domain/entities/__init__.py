"""Domain entities for adminctl.

Entities are pure Python dataclasses that represent core business concepts.
They have no dependencies on infrastructure or external frameworks.
"""

from adminctl.domain.entities.user import User, UserRole

__all__ = [
    "User",
    "UserRole",
]
