"""Tests for per-row member validation."""
import pytest

from nou_admin.services.member_fields import REQUIRED_FIELDS
from nou_admin.services.member_validation import validate_row


@pytest.mark.asyncio
async def test_valid_row_has_no_errors(store, make_row):
    assert await validate_row(make_row(), 2, store) == []


@pytest.mark.asyncio
@pytest.mark.parametrize("field", list(REQUIRED_FIELDS))
async def test_each_missing_required_field_is_reported(store, make_row, field):
    errors = await validate_row(make_row(**{field: ""}), 5, store)

    assert [e.field for e in errors] == [field]
    assert errors[0].row == 5
    assert errors[0].message == REQUIRED_FIELDS[field]


@pytest.mark.asyncio
async def test_absent_required_column_counts_as_missing(store, make_row):
    row = make_row()
    del row["commune"]

    errors = await validate_row(row, 2, store)
    assert [e.field for e in errors] == ["commune"]


@pytest.mark.asyncio
async def test_existing_email_is_rejected_with_value(store, make_row):
    store.members.append({"email": "a@b.com"})

    errors = await validate_row(make_row(email="a@b.com"), 3, store)

    assert len(errors) == 1
    assert errors[0].field == "email"
    assert errors[0].value == "a@b.com"
    assert errors[0].message == "Cet email existe déjà"


@pytest.mark.asyncio
@pytest.mark.parametrize("field, value", [
    ("telephone_principal", "50912345678"),
    ("nin", "123-456-7890"),
    ("nif", "987-654-3210"),
])
async def test_unique_fields_checked_against_store(store, make_row, field, value):
    store.members.append({field: value})

    errors = await validate_row(make_row(**{field: value}), 2, store)

    assert [(e.field, e.value) for e in errors] == [(field, value)]


@pytest.mark.asyncio
async def test_blank_optional_unique_fields_are_not_looked_up(store, make_row):
    await validate_row(make_row(email="", nif=""), 2, store)

    looked_up = {field for field, _ in store.lookups}
    assert "email" not in looked_up
    assert "nif" not in looked_up


@pytest.mark.asyncio
async def test_unknown_referral_code_is_rejected(store, make_row):
    errors = await validate_row(make_row(code_parrain="AXX0000"), 2, store)

    assert len(errors) == 1
    assert errors[0].field == "code_parrain"
    assert errors[0].message == "Code de parrainage invalide"
    assert errors[0].value == "AXX0000"


@pytest.mark.asyncio
async def test_known_referral_code_is_accepted(store, make_row):
    store.members.append({"code_adhesion": "AJD5678"})
    assert await validate_row(make_row(code_parrain="AJD5678"), 2, store) == []


@pytest.mark.asyncio
@pytest.mark.parametrize("referral", ["", "   "])
async def test_blank_referral_code_never_rejects(store, make_row, referral):
    assert await validate_row(make_row(code_parrain=referral), 2, store) == []


@pytest.mark.asyncio
async def test_errors_are_cumulative(store, make_row):
    store.members.append({"email": "jean.dupont@example.com", "nin": "123-456-7890"})

    errors = await validate_row(make_row(sexe="", commune="", code_parrain="NOPE"), 7, store)

    assert [e.field for e in errors] == ["sexe", "commune", "email", "nin", "code_parrain"]
    assert {e.row for e in errors} == {7}
