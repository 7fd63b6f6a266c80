"""Thin async client for the NOU backend API (authentication only)."""
import logging
from dataclasses import dataclass
from typing import Any

import httpx

from nou_admin.core.config import settings

logger = logging.getLogger(__name__)


class BackendResponseError(Exception):
    """The backend answered with something other than JSON."""


@dataclass
class BackendReply:
    status_code: int
    payload: dict[str, Any]


async def login(identifier: str, password: str) -> BackendReply:
    """POST /auth/login on the backend and return its JSON answer.

    Raises:
        BackendResponseError: non-JSON body (proxy error page, HTML 5xx...).
        httpx.HTTPError: the backend could not be reached.
    """
    async with httpx.AsyncClient(
        base_url=settings.BACKEND_API_URL,
        timeout=settings.BACKEND_TIMEOUT_SECONDS,
    ) as client:
        response = await client.post(
            "/auth/login",
            json={"identifier": identifier, "password": password},
        )

    content_type = response.headers.get("content-type", "")
    if "application/json" not in content_type:
        logger.error("Backend returned non-JSON response: %s", response.text[:200])
        raise BackendResponseError(content_type or "no content-type")

    return BackendReply(status_code=response.status_code, payload=response.json())
