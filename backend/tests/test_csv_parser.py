"""Tests for the member CSV parser."""
import pytest

from nou_admin.services.csv_parser import EmptyFileError, ImportFileError, parse_member_csv


SIMPLE = "nom,prenom,nin\nDupont,Jean,111\nMartin,Sophie,222\n"


def test_rows_keyed_by_header_in_file_order():
    rows = parse_member_csv(SIMPLE)

    assert rows == [
        {"nom": "Dupont", "prenom": "Jean", "nin": "111"},
        {"nom": "Martin", "prenom": "Sophie", "nin": "222"},
    ]


def test_parsing_is_deterministic():
    content = SIMPLE.encode("utf-8")
    assert parse_member_csv(content) == parse_member_csv(content)


def test_bom_prefixed_bytes_parse_like_plain_file():
    plain = SIMPLE.encode("utf-8")
    with_bom = b"\xef\xbb\xbf" + plain

    assert parse_member_csv(with_bom) == parse_member_csv(plain)
    assert "nom" in parse_member_csv(with_bom)[0]


def test_bom_prefixed_str_parses_like_plain_file():
    assert parse_member_csv("\ufeff" + SIMPLE) == parse_member_csv(SIMPLE)


def test_values_and_headers_are_trimmed():
    rows = parse_member_csv(" nom , prenom \n  Dupont ,  Jean  \n")
    assert rows == [{"nom": "Dupont", "prenom": "Jean"}]


def test_blank_lines_are_discarded():
    rows = parse_member_csv("nom,prenom\n\n   \nDupont,Jean\n\n")
    assert rows == [{"nom": "Dupont", "prenom": "Jean"}]


def test_short_row_padded_with_empty_strings():
    rows = parse_member_csv("nom,prenom,nin\nDupont\n")
    assert rows == [{"nom": "Dupont", "prenom": "", "nin": ""}]


def test_extra_fields_are_dropped():
    rows = parse_member_csv("nom,prenom\nDupont,Jean,surplus,more\n")
    assert rows == [{"nom": "Dupont", "prenom": "Jean"}]


def test_quoted_field_keeps_embedded_comma():
    rows = parse_member_csv('nom,adresse_complete,commune\nDupont,"123 Rue Example, Port-au-Prince",Delmas\n')
    assert rows[0]["adresse_complete"] == "123 Rue Example, Port-au-Prince"
    assert rows[0]["commune"] == "Delmas"


def test_crlf_line_endings():
    rows = parse_member_csv(b"nom,prenom\r\nDupont,Jean\r\nMartin,Sophie\r\n")
    assert [r["prenom"] for r in rows] == ["Jean", "Sophie"]


def test_no_type_conversion():
    rows = parse_member_csv("nb_enfants,a_ete_condamne\n3,1\n")
    assert rows[0] == {"nb_enfants": "3", "a_ete_condamne": "1"}


@pytest.mark.parametrize("content", ["", "   \n\n", "nom,prenom\n", "nom,prenom\n\n  \n"])
def test_missing_header_or_data_raises_empty_file_error(content):
    with pytest.raises(EmptyFileError):
        parse_member_csv(content)


def test_empty_file_error_is_an_import_file_error():
    with pytest.raises(ImportFileError, match="au moins une ligne"):
        parse_member_csv(b"")


def test_unclosed_quote_raises_instead_of_swallowing_rows():
    content = (
        "nom,prenom,adresse_complete,commune\n"
        'Dupont,Jean,"12 Rue X,Delmas\n'
        "Martin,Sophie,5 Rue Y,Delmas\n"
        "Pierre,Luc,7 Rue Z,Delmas\n"
    )

    with pytest.raises(ImportFileError, match="CSV invalide à la ligne"):
        parse_member_csv(content)


def test_text_after_closing_quote_raises():
    content = 'nom,adresse_complete\nDupont,"12 Rue X" bis\n'

    with pytest.raises(ImportFileError, match="ligne 2"):
        parse_member_csv(content)
