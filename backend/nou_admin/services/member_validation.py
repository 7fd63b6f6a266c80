"""Per-row validation of imported members.

Checks are cumulative: a row collects every error it triggers and is
accepted only when the list comes back empty. The store is only read.
"""
from nou_admin.schemas.imports import ImportRowError
from nou_admin.services.csv_parser import ImportRow
from nou_admin.services.member_fields import REQUIRED_FIELDS, UNIQUE_FIELDS
from nou_admin.services.member_store import MemberStore

REFERRAL_FIELD = "code_parrain"
INVALID_REFERRAL_MESSAGE = "Code de parrainage invalide"


async def validate_row(row: ImportRow, line: int, store: MemberStore) -> list[ImportRowError]:
    """Return the validation errors of one CSV row (empty list = accepted).

    Args:
        row: Column name → trimmed raw value.
        line: 1-based line number of the row in the uploaded file.
        store: Member store used for uniqueness and referral lookups.
    """
    errors: list[ImportRowError] = []

    for field, message in REQUIRED_FIELDS.items():
        if not row.get(field):
            errors.append(ImportRowError(row=line, field=field, message=message))

    for field, message in UNIQUE_FIELDS.items():
        value = row.get(field)
        if value and await store.exists(field, value):
            errors.append(ImportRowError(row=line, field=field, message=message, value=value))

    referral = (row.get(REFERRAL_FIELD) or "").strip()
    if referral and not await store.exists("code_adhesion", referral):
        errors.append(ImportRowError(
            row=line, field=REFERRAL_FIELD, message=INVALID_REFERRAL_MESSAGE, value=referral,
        ))

    return errors
