"""Member CSV bulk import and template download."""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile, status
from fastapi.responses import Response

from nou_admin.core.deps import get_current_admin, get_member_store
from nou_admin.core.errors import ApiError
from nou_admin.schemas.imports import ImportResponse
from nou_admin.services.csv_parser import ImportFileError
from nou_admin.services.csv_template import TEMPLATE_FILENAME, render_template
from nou_admin.services.import_report import build_response
from nou_admin.services.member_import import run_import
from nou_admin.services.member_store import MemberStore

logger = logging.getLogger(__name__)

router = APIRouter()


# ─── POST /membres/import ───

@router.post("/import", response_model=ImportResponse, summary="Bulk import members from CSV (admin)")
async def import_members(
    admin: Annotated[dict, Depends(get_current_admin)],
    store: Annotated[MemberStore, Depends(get_member_store)],
    file: UploadFile | None = File(default=None),
):
    if file is None:
        raise ApiError(status.HTTP_400_BAD_REQUEST, "Aucun fichier fourni")
    if not (file.filename or "").lower().endswith(".csv"):
        raise ApiError(status.HTTP_400_BAD_REQUEST, "Le fichier doit être au format CSV")

    logger.info("Member import requested by %s: %s", admin.get("username"), file.filename)
    content = await file.read()

    try:
        result = await run_import(content, store)
    except ImportFileError as exc:
        raise ApiError(status.HTTP_400_BAD_REQUEST, f"Erreur: {exc}")
    except Exception as exc:
        logger.error("Erreur import CSV: %s", exc, exc_info=True)
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, f"Erreur: {exc}")

    return build_response(result)


# ─── GET /membres/template ───

@router.get("/template", summary="Download the member import CSV template")
async def download_template():
    return Response(
        content=render_template(),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{TEMPLATE_FILENAME}"'},
    )
