"""SQLAlchemy models for adminctl tables.

All models inherit from the Base class defined in database.py.
"""

from adminctl.infrastructure.persistence.models.user import UserModel

__all__ = [
    "UserModel",
]
