"""
Error bodies shared by every route.

Every failure is rendered as ``{"errors": [{"msg": ..., "field": ...}]}``;
``field`` is only present for validation errors. 500 responses carry a
generic message and never the underlying exception text.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

SERVER_ERROR = "Server Error"


def error_item(msg: str, field: str | None = None) -> dict[str, str]:
    item = {"msg": msg}
    if field:
        item["field"] = field
    return item


class ApiError(Exception):
    def __init__(self, status_code: int, *messages: str):
        super().__init__(", ".join(messages))
        self.status_code = status_code
        self.errors = [error_item(m) for m in messages]


def bad_request(msg: str) -> ApiError:
    return ApiError(status.HTTP_400_BAD_REQUEST, msg)


def server_error() -> ApiError:
    return ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR)


def _validation_message(error: dict) -> str:
    ctx = error.get("ctx") or {}
    if error.get("type") == "value_error" and "error" in ctx:
        return str(ctx["error"])
    return error.get("msg", "Invalid value")


def _validation_field(loc: tuple | list) -> str:
    parts = [str(part) for part in loc]
    if parts and parts[0] in {"body", "path", "query", "header"}:
        parts = parts[1:]
    return ".".join(parts)


def validation_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    return [
        error_item(_validation_message(err), _validation_field(err.get("loc", ())))
        for err in exc.errors()
    ]


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        if exc.status_code >= 500:
            logger.error("api_error path=%s status=%d", request.url.path, exc.status_code)
        return JSONResponse(status_code=exc.status_code, content={"errors": exc.errors})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = validation_errors(exc)
        logger.info("validation_error path=%s fields=%s", request.url.path, [e.get("field") for e in errors])
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors})
