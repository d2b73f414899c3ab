"""adminctl - account provisioning for the platform database.

Grants roles to accounts with a single atomic upsert keyed on email.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
