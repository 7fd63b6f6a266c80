"""CSV reading for the member import.

Responsibilities:
  • BOM removal (UTF-8 / UTF-8-SIG)
  • Blank-record filtering
  • Header trimming and positional zip of each record against the header
"""
import csv
import io
import logging

logger = logging.getLogger(__name__)

ImportRow = dict[str, str]


class ImportFileError(Exception):
    """The uploaded file cannot be turned into rows; aborts the whole import."""


class EmptyFileError(ImportFileError):
    def __init__(self) -> None:
        super().__init__(
            "Le fichier CSV doit contenir au moins une ligne d'en-tête et une ligne de données"
        )


def parse_member_csv(content: str | bytes) -> list[ImportRow]:
    """Parse an uploaded CSV into ordered rows keyed by header name.

    Quoted fields (embedded commas, quotes or newlines) are honoured.
    Short records are padded with "" and surplus cells are dropped.

    Raises:
        EmptyFileError: fewer than two non-blank records (header + data).
        ImportFileError: a quoted field is left open or malformed.
    """
    text = _decode(content)
    reader = csv.reader(io.StringIO(text, newline=""), strict=True)
    try:
        records = [r for r in reader if not _is_blank(r)]
    except csv.Error as exc:
        raise ImportFileError(f"CSV invalide à la ligne {reader.line_num}: {exc}") from exc
    if len(records) < 2:
        raise EmptyFileError()

    headers = [h.strip() for h in records[0]]
    rows: list[ImportRow] = []
    for record in records[1:]:
        values = [v.strip() for v in record]
        rows.append({
            header: values[i] if i < len(values) else ""
            for i, header in enumerate(headers)
        })

    logger.debug("parse_member_csv: %d columns, %d rows", len(headers), len(rows))
    return rows


def _decode(content: str | bytes) -> str:
    if isinstance(content, bytes):
        # utf-8-sig drops a leading BOM when present
        return content.decode("utf-8-sig", errors="replace")
    if content.startswith("\ufeff"):
        return content[1:]
    return content


def _is_blank(record: list[str]) -> bool:
    return not record or (len(record) == 1 and not record[0].strip())
