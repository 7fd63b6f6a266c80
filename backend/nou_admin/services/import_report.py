"""Human-readable summary of a member import run."""
from nou_admin.schemas.imports import ImportResponse, ImportResult


def format_summary(result: ImportResult) -> str:
    return (
        f"Import terminé: {result.success} membre(s) créé(s), "
        f"{result.skipped} ligne(s) ignorée(s)"
    )


def build_response(result: ImportResult) -> ImportResponse:
    return ImportResponse(success=True, message=format_summary(result), data=result)
