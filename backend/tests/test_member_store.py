"""Tests for the SQLAlchemy-backed member store, using mocked sessions."""
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from nou_admin.models.member import Membre
from nou_admin.services.member_store import DuplicateMemberError, SqlMemberStore


def _mock_session(found_id: int | None = None) -> AsyncMock:
    result = MagicMock()
    result.scalar_one_or_none.return_value = found_id

    session = AsyncMock()
    session.add = MagicMock()
    session.execute = AsyncMock(return_value=result)
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    return session


@pytest.mark.asyncio
async def test_exists_true_when_a_row_matches():
    store = SqlMemberStore(_mock_session(found_id=42))
    assert await store.exists("email", "a@b.com") is True


@pytest.mark.asyncio
async def test_exists_false_when_no_row_matches():
    session = _mock_session(found_id=None)
    store = SqlMemberStore(session)

    assert await store.exists("code_adhesion", "AJD5678") is False
    session.execute.assert_awaited_once()


@pytest.mark.asyncio
async def test_exists_rejects_unknown_field():
    store = SqlMemberStore(_mock_session())
    with pytest.raises(ValueError):
        await store.exists("password_hash", "x")


@pytest.mark.asyncio
async def test_insert_adds_member_and_commits():
    session = _mock_session()
    store = SqlMemberStore(session)

    await store.insert({"nom": "Dupont", "prenom": "Jean", "code_adhesion": "AJD5678"})

    added = session.add.call_args.args[0]
    assert isinstance(added, Membre)
    assert added.code_adhesion == "AJD5678"
    session.commit.assert_awaited_once()
    session.rollback.assert_not_awaited()


@pytest.mark.asyncio
async def test_insert_constraint_violation_becomes_duplicate_error():
    session = _mock_session()
    session.commit.side_effect = IntegrityError("INSERT INTO membres", {}, Exception("duplicate key"))
    store = SqlMemberStore(session)

    with pytest.raises(DuplicateMemberError):
        await store.insert({"nom": "Dupont", "code_adhesion": "AJD5678"})

    session.rollback.assert_awaited_once()


@pytest.mark.asyncio
async def test_insert_other_failure_rolls_back_and_propagates():
    session = _mock_session()
    session.commit.side_effect = OperationalError("INSERT INTO membres", {}, Exception("gone"))
    store = SqlMemberStore(session)

    with pytest.raises(OperationalError):
        await store.insert({"nom": "Dupont", "code_adhesion": "AJD5678"})

    session.rollback.assert_awaited_once()
