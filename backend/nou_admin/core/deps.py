from typing import Annotated

from fastapi import Depends, Request, status
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from nou_admin.core.config import settings
from nou_admin.core.errors import ApiError
from nou_admin.core.security import decode_token
from nou_admin.db.session import get_session
from nou_admin.services.member_store import SqlMemberStore


def _read_session_token(request: Request, key: str) -> dict:
    token = request.cookies.get(settings.AUTH_COOKIE_NAME)
    if not token:
        raise ApiError(status.HTTP_401_UNAUTHORIZED, "Non authentifié", key=key)
    try:
        payload = decode_token(token)
    except JWTError:
        raise ApiError(status.HTTP_401_UNAUTHORIZED, "Token invalide", key=key)
    if payload.get("type") != "access":
        raise ApiError(status.HTTP_401_UNAUTHORIZED, "Token invalide", key=key)
    return payload


async def get_current_admin(request: Request) -> dict:
    """Validate the session cookie and return the admin JWT claims."""
    return _read_session_token(request, key="message")


async def get_current_admin_for_auth(request: Request) -> dict:
    """Same check as get_current_admin, reported under `error` for /auth routes."""
    return _read_session_token(request, key="error")


async def get_member_store(
    db: Annotated[AsyncSession, Depends(get_session)],
) -> SqlMemberStore:
    return SqlMemberStore(db)
