"""Admin session endpoints: login proxied to the NOU backend, cookie-based session."""
import logging

import httpx
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from nou_admin.core.config import settings
from nou_admin.core.deps import get_current_admin_for_auth
from nou_admin.core.errors import ApiError
from nou_admin.core.limiter import limiter
from nou_admin.core.security import create_access_token
from nou_admin.schemas.auth import AdminUser, LoginRequest, LoginResponse, MeResponse
from nou_admin.services import backend_client

logger = logging.getLogger(__name__)

router = APIRouter()

ADMIN_ROLE = "admin"


def _set_session_cookie(response: JSONResponse, name: str, value: str) -> None:
    response.set_cookie(
        name,
        value,
        max_age=settings.AUTH_COOKIE_MAX_AGE,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )


@router.post("/login", response_model=LoginResponse)
@limiter.limit(settings.LOGIN_RATE_LIMIT)
async def login(request: Request, body: LoginRequest):
    try:
        reply = await backend_client.login(body.identifier, body.password)
    except backend_client.BackendResponseError:
        raise ApiError(
            status.HTTP_502_BAD_GATEWAY,
            "Erreur de communication avec le serveur backend",
            key="error",
        )
    except httpx.HTTPError as exc:
        logger.error("Login error: %s", exc, exc_info=True)
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Erreur serveur", key="error")

    data = reply.payload.get("data") or {}
    membre = data.get("membre")
    if not (reply.payload.get("success") and membre):
        raise ApiError(
            status.HTTP_401_UNAUTHORIZED,
            reply.payload.get("message") or "Identifiants incorrects",
            key="error",
        )

    # the backend reports the role as either `role` or `role_utilisateur`
    role = membre.get("role") or membre.get("role_utilisateur")
    if role != ADMIN_ROLE:
        logger.info("Login refused for non-admin %s", membre.get("username"))
        raise ApiError(status.HTTP_403_FORBIDDEN, "Accès réservé aux administrateurs", key="error")

    user = AdminUser(
        id=membre.get("id"),
        email=membre.get("email") or "",
        username=membre.get("username"),
        code_adhesion=membre.get("code_adhesion"),
        nom=membre.get("nom"),
        prenom=membre.get("prenom"),
        role=role,
    )
    backend_token = data.get("token")

    response = JSONResponse(
        LoginResponse(user=user, backendToken=backend_token).model_dump(mode="json")
    )
    _set_session_cookie(response, settings.AUTH_COOKIE_NAME, create_access_token(user.model_dump()))
    if backend_token:
        _set_session_cookie(response, settings.BACKEND_COOKIE_NAME, backend_token)

    logger.info("Admin %s logged in", user.username)
    return response


@router.get("/me", response_model=MeResponse)
async def me(request: Request):
    backend_token = request.cookies.get(settings.BACKEND_COOKIE_NAME)
    if not backend_token or not request.cookies.get(settings.AUTH_COOKIE_NAME):
        raise ApiError(status.HTTP_401_UNAUTHORIZED, "Non authentifié", key="error")
    claims = await get_current_admin_for_auth(request)
    return MeResponse(user=AdminUser(**claims), token=backend_token)


@router.post("/logout")
async def logout():
    response = JSONResponse({"success": True})
    response.delete_cookie(settings.AUTH_COOKIE_NAME)
    response.delete_cookie(settings.BACKEND_COOKIE_NAME)
    return response
