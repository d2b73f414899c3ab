"""User repository for database operations."""

import uuid

from sqlalchemy import func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from adminctl.infrastructure.persistence.models import UserModel


class UserRepository:
    """Repository for user database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    def _dialect_insert(self):
        """Return the dialect-specific ``insert`` construct supporting ON CONFLICT."""
        dialect = self.session.bind.dialect.name
        if dialect == "postgresql":
            return postgresql.insert
        if dialect == "sqlite":
            return sqlite.insert
        raise NotImplementedError(f"Upsert is not supported for dialect '{dialect}'")

    def build_upsert(self, email: str, name: str | None, role: str):
        """Build the ``INSERT ... ON CONFLICT (email) DO UPDATE ... RETURNING`` statement.

        On the update path only ``role`` and ``updated_at`` are set; ``id``
        and ``name`` keep their stored values.
        """
        insert = self._dialect_insert()
        stmt = insert(UserModel).values(
            id=str(uuid.uuid4()),
            email=email,
            name=name,
            role=role,
        )
        return stmt.on_conflict_do_update(
            index_elements=["email"],
            set_={"role": stmt.excluded.role, "updated_at": func.now()},
        ).returning(UserModel)

    async def upsert_role(self, email: str, name: str | None, role: str) -> UserModel:
        """Create a user or update the role of the existing one, atomically.

        Args:
            email: User's email address (the conflict key).
            name: Display name, used only when the row is created.
            role: Role to assign.

        Returns:
            The user row as it is after the write.
        """
        result = await self.session.execute(
            self.build_upsert(email, name, role),
            execution_options={"populate_existing": True},
        )
        return result.scalar_one()

    async def list_all(self, role: str | None = None) -> list[UserModel]:
        """List users ordered by email, optionally filtered by role."""
        query = select(UserModel).order_by(UserModel.email)
        if role is not None:
            query = query.where(UserModel.role == role)
        result = await self.session.execute(query)
        return list(result.scalars().all())
