"""Import members from a CSV file straight into the configured database.

Same pipeline as POST /api/v1/membres/import, without the HTTP layer.
Run: python scripts/import_members.py membres.csv
"""
import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from nou_admin.db.session import AsyncSessionLocal, engine
from nou_admin.services.csv_parser import ImportFileError
from nou_admin.services.import_report import format_summary
from nou_admin.services.member_import import run_import
from nou_admin.services.member_store import SqlMemberStore

MAX_ERRORS_SHOWN = 10


async def main(path: Path) -> int:
    content = path.read_bytes()
    try:
        async with AsyncSessionLocal() as db:
            result = await run_import(content, SqlMemberStore(db))
    except ImportFileError as exc:
        print(f"  Erreur: {exc}")
        return 1
    finally:
        await engine.dispose()

    print(f"  {format_summary(result)}")
    if result.errors:
        print(f"  Premières erreurs (max {MAX_ERRORS_SHOWN}):")
        for err in result.errors[:MAX_ERRORS_SHOWN]:
            suffix = f" ({err.value})" if err.value else ""
            print(f"    Ligne {err.row} [{err.field}]: {err.message}{suffix}")
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("csv_file", type=Path)
    args = parser.parse_args()
    sys.exit(asyncio.run(main(args.csv_file)))
