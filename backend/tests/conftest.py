"""Shared fixtures: an in-memory member store and CSV builders."""
import csv
import io
from typing import Any

import pytest

from nou_admin.services.member_store import LOOKUP_FIELDS, DuplicateMemberError


class InMemoryMemberStore:
    """MemberStore stand-in that enforces the same unique columns as `membres`."""

    def __init__(self, members: list[dict[str, Any]] | None = None):
        self.members: list[dict[str, Any]] = list(members or [])
        self.lookups: list[tuple[str, str]] = []
        self.fail_inserts_with: Exception | None = None

    async def exists(self, field: str, value: str) -> bool:
        self.lookups.append((field, value))
        return any(m.get(field) == value for m in self.members)

    async def insert(self, record: dict[str, Any]) -> None:
        if self.fail_inserts_with is not None:
            raise self.fail_inserts_with
        for field in LOOKUP_FIELDS:
            value = record.get(field)
            if value is not None and any(m.get(field) == value for m in self.members):
                raise DuplicateMemberError("Un membre avec ces identifiants existe déjà")
        self.members.append(record)


def member_row(**overrides: str) -> dict[str, str]:
    """A CSV row that passes validation against an empty store."""
    row = {
        "nom": "Dupont",
        "prenom": "Jean",
        "sexe": "Homme",
        "date_de_naissance": "1990-01-15",
        "lieu_de_naissance": "Port-au-Prince",
        "nin": "123-456-7890",
        "nif": "",
        "telephone_principal": "50912345678",
        "email": "jean.dupont@example.com",
        "adresse_complete": "123 Rue Example, Port-au-Prince",
        "departement": "Ouest",
        "commune": "Port-au-Prince",
        "code_parrain": "",
    }
    row.update(overrides)
    return row


def to_csv(rows: list[dict[str, str]], bom: bool = False) -> bytes:
    headers = list(rows[0].keys())
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(headers)
    for row in rows:
        writer.writerow([row.get(h, "") for h in headers])
    text = ("\ufeff" if bom else "") + buf.getvalue()
    return text.encode("utf-8")


@pytest.fixture
def store() -> InMemoryMemberStore:
    return InMemoryMemberStore()


@pytest.fixture
def make_row():
    return member_row


@pytest.fixture
def make_csv():
    return to_csv
