"""Domain services for adminctl.

Services contain business logic that doesn't naturally fit within a single entity.
"""

from adminctl.domain.services.admin_provisioner import (
    AdminProvisioner,
    AdminProvisioningError,
    normalize_email,
)

__all__ = [
    "AdminProvisioner",
    "AdminProvisioningError",
    "normalize_email",
]
