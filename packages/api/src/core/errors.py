# This project was developed with assistance from AI tools.
"""RFC 7807 Problem Details responses shared by exception handlers and routes."""

import uuid

from fastapi import Request
from fastapi.responses import JSONResponse

from ..schemas.error import ErrorResponse

HTTP_STATUS_TITLES: dict[int, str] = {
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    409: "Conflict",
    422: "Unprocessable Entity",
    500: "Internal Server Error",
}


def request_id_for(request: Request) -> str:
    """Caller-supplied X-Request-ID, or a fresh one."""
    return request.headers.get("x-request-id", str(uuid.uuid4()))


def problem_response(
    request: Request,
    status_code: int,
    detail: str,
    *,
    model: type[ErrorResponse] = ErrorResponse,
    headers: dict[str, str] | None = None,
    request_id: str | None = None,
    **extra,
) -> JSONResponse:
    """Build a Problem Details JSONResponse.

    ``model`` may be a subclass of ErrorResponse; ``extra`` fills its
    additional fields (e.g. ``errors`` and ``form`` on FormErrorResponse).
    """
    body = model(
        type="about:blank",
        title=HTTP_STATUS_TITLES.get(status_code, "Error"),
        status=status_code,
        detail=detail,
        request_id=request_id or request_id_for(request),
        instance=request.url.path,
        **extra,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)
