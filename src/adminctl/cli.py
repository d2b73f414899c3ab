"""Command-line interface for adminctl.

This module provides the CLI commands for provisioning accounts and
managing the adminctl database.
"""

import asyncio

import click

from adminctl import __version__
from adminctl.core.config import get_settings
from adminctl.core.logging import configure_logging, get_logger
from adminctl.domain.entities import UserRole
from adminctl.infrastructure.persistence.database import get_db_manager

ROLE_CHOICE = click.Choice(UserRole.values(), case_sensitive=False)


@click.group()
@click.version_option(version=__version__, prog_name="adminctl")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    default=None,
    help="Set log level (overrides ADMINCTL_LOG_LEVEL)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """adminctl - account provisioning for the platform database."""
    settings = get_settings()
    if log_level is not None:
        settings = settings.model_copy(update={"log_level": log_level})
    configure_logging(settings)
    ctx.obj = settings


@cli.command()
@click.option(
    "--email",
    type=str,
    default=None,
    help="Account email (defaults to ADMINCTL_ADMIN_EMAIL)",
)
@click.option(
    "--name",
    type=str,
    default=None,
    help="Display name used if the account is created (defaults to ADMINCTL_ADMIN_NAME)",
)
@click.option(
    "--role",
    type=ROLE_CHOICE,
    default=UserRole.ADMIN.value,
    show_default=True,
    help="Role to grant",
)
@click.pass_obj
def make_admin(settings, email: str | None, name: str | None, role: str) -> None:
    """Create an account with the given role, or promote the existing one.

    The write is a single upsert keyed on email, so running the command
    again leaves the account unchanged.
    """
    from adminctl.domain.services import AdminProvisioner, AdminProvisioningError

    logger = get_logger(__name__)
    # Explicit blank values fall through to validation
    if email is None:
        email = settings.admin_email
    if name is None:
        name = settings.admin_name

    async def provision() -> bool:
        db = get_db_manager()
        try:
            async with db.session() as session:
                user = await AdminProvisioner.ensure_admin(
                    email=email,
                    name=name,
                    session=session,
                    role=UserRole(role.upper()),
                )
        except AdminProvisioningError as e:
            click.echo(f"Error: {e.message}", err=True)
            logger.error("Account provisioning failed", email=email, error=e.message)
            return False
        finally:
            await db.disconnect()

        click.echo(
            f"\nUser updated/created:\n"
            f"  Email: {user.email}\n"
            f"  Name:  {user.name or '-'}\n"
            f"  Role:  {user.role.value}\n"
        )
        return True

    if not asyncio.run(provision()):
        raise SystemExit(1)


@cli.command()
@click.option(
    "--role",
    type=ROLE_CHOICE,
    default=None,
    help="Only list accounts holding this role",
)
def list_users(role: str | None) -> None:
    """List accounts with their roles."""
    from adminctl.infrastructure.persistence.repositories import UserRepository

    async def show() -> None:
        db = get_db_manager()
        try:
            async with db.session() as session:
                users = await UserRepository(session).list_all(
                    role=role.upper() if role else None
                )
        finally:
            await db.disconnect()

        click.echo(f"Users: {len(users)}")
        for user in users:
            click.echo(f"  - {user.name or '-'} ({user.email}) - {user.role}")

    asyncio.run(show())


@cli.command()
@click.option(
    "--force",
    is_flag=True,
    help="Skip confirmation prompt",
)
@click.pass_obj
def init_db(settings, force: bool) -> None:
    """Initialize the database.

    Creates all database tables. Use this only in development.
    In production, use migrations instead.
    """
    from adminctl.infrastructure.persistence.database import init_database

    if settings.is_production and not force:
        click.echo(
            "ERROR: Running in production mode. Use migrations instead of init-db.",
            err=True,
        )
        raise SystemExit(1)

    if not force:
        click.confirm(
            "This will create all database tables. Continue?",
            abort=True,
            default=False,
        )

    async def initialize() -> None:
        db = get_db_manager()
        try:
            await init_database(db)
            click.echo("Database initialized successfully.")
        finally:
            await db.disconnect()

    asyncio.run(initialize())


@cli.command()
@click.pass_obj
def info(settings) -> None:
    """Display adminctl configuration."""
    from sqlalchemy.engine import make_url

    database_url = make_url(settings.database_url).render_as_string(hide_password=True)

    click.echo(f"""
adminctl v{settings.app_version}
{'=' * 40}

Configuration:
  Environment:  {settings.environment}

Database:
  URL:          {database_url}
  Pool Size:    {settings.db_pool_size}
  Echo:         {settings.db_echo}

Provisioning defaults:
  Email:        {settings.admin_email}
  Name:         {settings.admin_name}

Logging:
  Level:        {settings.log_level}
  Format:       {settings.log_format}
""")


def main() -> None:
    """Main entry point for the CLI.

    Called by the `adminctl` console script and `python -m adminctl`.
    """
    cli()


if __name__ == "__main__":
    main()
