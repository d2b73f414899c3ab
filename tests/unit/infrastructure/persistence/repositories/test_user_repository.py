"""Tests for UserRepository against an in-memory SQLite database."""

import re
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.ext.asyncio import AsyncSession

from adminctl.infrastructure.persistence.models import UserModel
from adminctl.infrastructure.persistence.repositories import UserRepository


def _session_for_dialect(name: str) -> MagicMock:
    session = MagicMock(spec=AsyncSession)
    session.bind = MagicMock()
    session.bind.dialect.name = name
    session.execute = AsyncMock()
    return session


@pytest.mark.asyncio
async def test_upsert_role_creates_missing_user(db_session: AsyncSession):
    repo = UserRepository(db_session)

    user = await repo.upsert_role("user@example.com", "Jane Doe", "ADMIN")
    await db_session.commit()

    assert user.email == "user@example.com"
    assert user.name == "Jane Doe"
    assert user.role == "ADMIN"
    assert user.id
    assert len(await repo.list_all()) == 1


@pytest.mark.asyncio
async def test_upsert_role_promotes_existing_user(db_session: AsyncSession):
    """Only the role changes; id and name keep their stored values."""
    existing = UserModel(
        id="7a4b5c1e-0d2f-4e63-9b8a-1c2d3e4f5a6b",
        email="user@example.com",
        name="Original Name",
        role="APPLICANT",
    )
    db_session.add(existing)
    await db_session.commit()

    repo = UserRepository(db_session)
    user = await repo.upsert_role("user@example.com", "Someone Else", "ADMIN")
    await db_session.commit()

    assert user.id == "7a4b5c1e-0d2f-4e63-9b8a-1c2d3e4f5a6b"
    assert user.name == "Original Name"
    assert user.role == "ADMIN"

    stored = await repo.list_all()
    assert [(u.email, u.name, u.role) for u in stored] == [
        ("user@example.com", "Original Name", "ADMIN")
    ]


@pytest.mark.asyncio
async def test_upsert_role_is_idempotent(db_session: AsyncSession):
    repo = UserRepository(db_session)

    first = await repo.upsert_role("user@example.com", "Jane Doe", "ADMIN")
    await db_session.commit()
    first_id = first.id
    second = await repo.upsert_role("user@example.com", "Jane Doe", "ADMIN")
    await db_session.commit()

    assert second.id == first_id
    assert second.role == "ADMIN"
    assert len(await repo.list_all()) == 1


@pytest.mark.asyncio
async def test_list_all_filters_by_role(db_session: AsyncSession):
    repo = UserRepository(db_session)
    await repo.upsert_role("b@example.com", "Bob", "ADMIN")
    await repo.upsert_role("a@example.com", "Alice", "APPLICANT")
    await repo.upsert_role("c@example.com", "Carol", "ADMIN")
    await db_session.commit()

    everyone = await repo.list_all()
    admins = await repo.list_all(role="ADMIN")

    assert [u.email for u in everyone] == ["a@example.com", "b@example.com", "c@example.com"]
    assert [u.email for u in admins] == ["b@example.com", "c@example.com"]


def test_postgresql_upsert_only_updates_role():
    """The PostgreSQL statement conflicts on email and sets role and updated_at only."""
    repo = UserRepository(_session_for_dialect("postgresql"))

    stmt = repo.build_upsert("user@example.com", "Jane Doe", "ADMIN")
    sql = str(stmt.compile(dialect=postgresql.dialect()))

    assert "INSERT INTO users" in sql
    assert "ON CONFLICT (email) DO UPDATE SET role = excluded.role, updated_at = now()" in sql
    assert "RETURNING" in sql

    set_clause = sql.split("DO UPDATE SET", 1)[1].split("RETURNING", 1)[0]
    assert re.search(r"\bname\b", set_clause) is None
    assert re.search(r"\bid\b", set_clause) is None


@pytest.mark.asyncio
async def test_upsert_role_unsupported_dialect():
    session = _session_for_dialect("mysql")
    repo = UserRepository(session)

    with pytest.raises(NotImplementedError, match="mysql"):
        await repo.upsert_role("user@example.com", "Jane Doe", "ADMIN")

    session.execute.assert_not_awaited()
