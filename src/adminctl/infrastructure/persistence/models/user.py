"""SQLAlchemy model for the users table.

Users are uniquely identified by email.
"""

from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from adminctl.infrastructure.persistence.database import Base


class UserModel(Base):
    """SQLAlchemy model for the users table.

    Attributes:
        id: Primary key (UUID string).
        email: User's email address (unique).
        name: Display name.
        role: Role name, one of the ``UserRole`` values.
        created_at: Timestamp when the user was created.
        updated_at: Timestamp when the user was last updated.
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        comment="User ID (UUID)",
    )
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="User email address",
    )
    name: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="Display name",
    )
    role: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="APPLICANT",
        server_default="APPLICANT",
        index=True,
        comment="Role (APPLICANT, CONSULTANT, REVIEWER, ADMIN)",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
