"""API error type rendered as the dashboard's `{success: false, ...}` payload."""
from fastapi import Request
from fastapi.responses import JSONResponse


class ApiError(Exception):
    """Abort the request with `{"success": false, <key>: message}`.

    The import endpoints report failures under `message`; the auth
    endpoints use `error`, as the dashboard front-end expects.
    """

    def __init__(self, status_code: int, message: str, key: str = "message"):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.key = key


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, exc.key: exc.message},
    )
