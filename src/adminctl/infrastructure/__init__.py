"""Infrastructure layer - External dependencies and implementations.

This layer contains the database adapters (SQLAlchemy) used by the
domain services.
"""

from adminctl.infrastructure.persistence.database import (
    Base,
    DatabaseManager,
    get_db_manager,
    init_database,
)

__all__ = [
    "Base",
    "DatabaseManager",
    "get_db_manager",
    "init_database",
]
