"""User entity and role enumeration.

Users are uniquely identified by their email address. Each user carries a
single role that defines their privilege level on the platform.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class UserRole(str, Enum):
    """Privilege levels a user account can hold.

    New sign-ups start as APPLICANT. ADMIN has full access.
    """

    APPLICANT = "APPLICANT"
    CONSULTANT = "CONSULTANT"
    REVIEWER = "REVIEWER"
    ADMIN = "ADMIN"

    @classmethod
    def values(cls) -> list[str]:
        return [role.value for role in cls]


@dataclass
class User:
    """User entity representing a platform account.

    Attributes:
        id: Unique identifier (UUID string).
        email: User's email address (unique across the platform).
        name: Display name, may be missing for accounts created by sign-in links.
        role: The user's privilege level.
        created_at: Timestamp when the user was created.
        updated_at: Timestamp when the user was last updated.
    """

    id: str
    email: str
    name: str | None = None
    role: UserRole = UserRole.APPLICANT
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        """Validate user data after initialization."""
        if not self.id:
            raise ValueError("User ID is required")
        if not self.email:
            raise ValueError("Email is required")
        if not isinstance(self.role, UserRole):
            try:
                self.role = UserRole(self.role)
            except ValueError:
                raise ValueError(f"Invalid role: {self.role}") from None
