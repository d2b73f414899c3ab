"""Service for granting roles to user accounts.

The provisioner makes sure an account exists for an email and holds the
requested role (ADMIN unless told otherwise). It relies on a single atomic
upsert keyed on email, so calling it repeatedly is safe.
"""

import re

from sqlalchemy.ext.asyncio import AsyncSession

from adminctl.core.logging import get_logger
from adminctl.domain.entities import User, UserRole

logger = get_logger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class AdminProvisioningError(Exception):
    """Raised when an account cannot be provisioned."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class AdminProvisioner:
    """Service for provisioning privileged accounts."""

    @staticmethod
    def validate(email: str, name: str) -> None:
        """Validate provisioning input.

        Args:
            email: Normalized email address.
            name: Display name for the account.

        Raises:
            AdminProvisioningError: If the email is malformed or the name is blank.
        """
        if not EMAIL_PATTERN.match(email):
            raise AdminProvisioningError(f"Invalid email format: '{email}'")
        if not name or not name.strip():
            raise AdminProvisioningError("Display name is required")

    @staticmethod
    async def ensure_admin(
        email: str,
        name: str,
        session: AsyncSession,
        role: UserRole = UserRole.ADMIN,
    ) -> User:
        """Ensure an account with the given email exists and holds ``role``.

        Creates the account with ``name`` if it is missing. If it already
        exists only its role is changed; the stored display name is kept.

        Args:
            email: Email address identifying the account.
            name: Display name used when creating the account.
            session: Database session.
            role: Role to grant. Defaults to ADMIN.

        Returns:
            The account as stored after the write.

        Raises:
            AdminProvisioningError: If validation fails or the database write fails.
        """
        from adminctl.infrastructure.persistence.repositories import UserRepository

        email = normalize_email(email)
        AdminProvisioner.validate(email, name)

        user_repo = UserRepository(session)

        try:
            user = await user_repo.upsert_role(
                email=email,
                name=name.strip(),
                role=UserRole(role).value,
            )
            # Read the row before commit so no attribute reload is needed
            account = User(
                id=user.id,
                email=user.email,
                name=user.name,
                role=UserRole(user.role),
                created_at=user.created_at,
                updated_at=user.updated_at,
            )
            await session.commit()
        except Exception as e:
            await session.rollback()
            raise AdminProvisioningError(f"Failed to provision account: {e}") from e

        logger.info(
            "Account provisioned",
            user_id=account.id,
            email=account.email,
            role=account.role.value,
        )
        return account
