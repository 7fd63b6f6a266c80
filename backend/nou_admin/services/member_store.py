"""Access to the members table used by the import pipeline.

The pipeline only needs two things from the store: exact-match existence
lookups and single-row inserts. `MemberStore` is that contract;
`SqlMemberStore` implements it on an AsyncSession.
"""
import logging
from typing import Any, Protocol

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from nou_admin.models.member import Membre

logger = logging.getLogger(__name__)

LOOKUP_FIELDS = frozenset({
    "code_adhesion",
    "username",
    "email",
    "telephone_principal",
    "nin",
    "nif",
})


class DuplicateMemberError(Exception):
    """The store rejected an insert on one of its unique constraints."""


class MemberStore(Protocol):
    async def exists(self, field: str, value: str) -> bool: ...

    async def insert(self, record: dict[str, Any]) -> None: ...


class SqlMemberStore:
    """MemberStore backed by the `membres` table.

    Each insert is committed on its own; a failed insert is rolled back so
    the session stays usable for the next row.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def exists(self, field: str, value: str) -> bool:
        if field not in LOOKUP_FIELDS:
            raise ValueError(f"Unsupported member lookup field: {field}")
        column = getattr(Membre, field)
        result = await self.session.execute(select(Membre.id).where(column == value).limit(1))
        return result.scalar_one_or_none() is not None

    async def insert(self, record: dict[str, Any]) -> None:
        self.session.add(Membre(**record))
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            logger.warning(
                "Member insert rejected by constraint (code_adhesion=%s): %s",
                record.get("code_adhesion"), exc.orig,
            )
            raise DuplicateMemberError(
                "Un membre avec ces identifiants existe déjà"
            ) from exc
        except Exception:
            await self.session.rollback()
            raise
