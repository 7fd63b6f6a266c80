"""Member bulk import: orchestrates parser → validator → identifiers → insert.

Rows are handled strictly in file order, one at a time. Row-level failures
(validation, identifier generation, insert) are recorded in the
ImportResult and never stop the batch; anything raised outside the per-row
scope (unparseable file, store unreachable during validation) aborts the
whole import.
"""
import logging
import re
from datetime import date, datetime
from typing import Any

from nou_admin.core.config import settings
from nou_admin.core.security import hash_password
from nou_admin.schemas.imports import CreatedMember, ImportResult, ImportRowError, RejectedRow
from nou_admin.services.csv_parser import ImportRow, parse_member_csv
from nou_admin.services.identifiers import generate_code_adhesion, generate_username
from nou_admin.services.member_fields import (
    BOOLEAN_FIELDS,
    DATE_FIELDS,
    INTEGER_FIELDS,
    MEMBER_CSV_COLUMNS,
    REQUIRED_FIELDS,
    attribute_for,
)
from nou_admin.services.member_store import MemberStore
from nou_admin.services.member_validation import validate_row

logger = logging.getLogger(__name__)

GENERAL_FIELD = "general"
FIRST_DATA_LINE = 2  # line 1 = header

DATE_FORMATS = ("%Y-%m-%d", "%d/%m/%Y", "%Y/%m/%d")
LEADING_INT = re.compile(r"[+-]?\d+")


# ─── Record building ───

def _parse_date(value: str) -> date:
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            pass
    raise ValueError(f"Date invalide: '{value}'")


def _parse_int(value: str) -> int:
    # leading digits only: "3 enfants" -> 3
    match = LEADING_INT.match(value)
    if match is None:
        raise ValueError(f"Nombre invalide: '{value}'")
    return int(match.group())


def _convert(column: str, value: str) -> Any:
    if column in BOOLEAN_FIELDS:
        return 1 if value == "1" else 0
    if column in INTEGER_FIELDS:
        return _parse_int(value) if value else 0
    if column in DATE_FIELDS:
        return _parse_date(value)
    if column in REQUIRED_FIELDS:
        return value
    return value or None


def build_member_record(
    row: ImportRow,
    *,
    code_adhesion: str,
    username: str,
    password_hash: str,
    statut: str,
    role: str,
) -> dict[str, Any]:
    """Map a validated CSV row onto Membre attributes.

    Blank optional columns become None, 0/1 flags are coerced, counts
    default to 0 and the birth date is parsed.
    """
    record: dict[str, Any] = {
        attribute_for(column): _convert(column, row.get(column, ""))
        for column in MEMBER_CSV_COLUMNS
    }
    record.update(
        username=username,
        code_adhesion=code_adhesion,
        password_hash=password_hash,
        role_utilisateur=role,
        statut=statut,
    )
    return record


# ─── Orchestrator ───

class MemberImporter:
    """Runs one import batch against a MemberStore.

    The default credential is hashed once per batch and shared by every
    member created in it.
    """

    def __init__(
        self,
        store: MemberStore,
        *,
        password_hash: str | None = None,
        statut: str | None = None,
        role: str | None = None,
        max_attempts: int | None = None,
    ):
        self.store = store
        self.password_hash = password_hash or hash_password(settings.IMPORT_DEFAULT_PASSWORD)
        self.statut = statut or settings.IMPORT_DEFAULT_STATUS
        self.role = role or settings.IMPORT_DEFAULT_ROLE
        self.max_attempts = max_attempts

    async def run(self, rows: list[ImportRow]) -> ImportResult:
        result = ImportResult()
        logger.info("Member import started: %d rows", len(rows))

        for index, row in enumerate(rows):
            await self._process_row(result, row, index + FIRST_DATA_LINE)

        logger.info(
            "Member import finished: %d created, %d skipped, %d errors",
            result.success, result.skipped, len(result.errors),
        )
        return result

    async def _process_row(self, result: ImportResult, row: ImportRow, line: int) -> None:
        nom = row.get("nom", "")
        prenom = row.get("prenom", "")

        errors = await validate_row(row, line, self.store)
        if errors:
            reason = ", ".join(e.message for e in errors)
            logger.info("Row %d rejected: %s", line, reason)
            self._reject(result, nom, prenom, errors, reason)
            return

        try:
            code_adhesion = await generate_code_adhesion(
                prenom, nom, row.get("telephone_principal", ""), self.store, self.max_attempts,
            )
            username = await generate_username(prenom, nom, self.store, self.max_attempts)
            record = build_member_record(
                row,
                code_adhesion=code_adhesion,
                username=username,
                password_hash=self.password_hash,
                statut=self.statut,
                role=self.role,
            )
            await self.store.insert(record)
        except Exception as exc:
            message = f"Erreur lors de l'insertion: {exc}"
            logger.warning("Row %d not inserted: %s", line, exc)
            error = ImportRowError(row=line, field=GENERAL_FIELD, message=message)
            self._reject(result, nom, prenom, [error], message)
            return

        result.success += 1
        result.details.created.append(
            CreatedMember(nom=nom, prenom=prenom, code_adhesion=code_adhesion)
        )

    @staticmethod
    def _reject(
        result: ImportResult,
        nom: str,
        prenom: str,
        errors: list[ImportRowError],
        reason: str,
    ) -> None:
        result.errors.extend(errors)
        result.skipped += 1
        result.details.duplicates.append(
            RejectedRow(nom=nom or "N/A", prenom=prenom or "N/A", reason=reason)
        )


async def run_import(content: str | bytes, store: MemberStore, **options: Any) -> ImportResult:
    """Parse an uploaded CSV and import every row into the store.

    Raises:
        ImportFileError: the file has no header or no data row.
    """
    rows = parse_member_csv(content)
    return await MemberImporter(store, **options).run(rows)
