from __future__ import annotations

import logging
from typing import Any, Iterable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.json import UTF8JSONResponse

log = logging.getLogger("uvicorn")


class AppError(Exception):
    status_code = 500
    message = "internal error"

    def __init__(self, message: str | None = None, details: list[dict[str, str]] | None = None):
        self.message = message or self.message
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class ValidationFailed(AppError):
    status_code = 400
    message = "validation error"


class Conflict(AppError):
    status_code = 409
    message = "username or email already exists"


class Unauthenticated(AppError):
    status_code = 401
    message = "missing token"


class InvalidCredentials(AppError):
    status_code = 401
    message = "invalid credentials"


class Forbidden(AppError):
    status_code = 403
    message = "invalid token"


class NotFound(AppError):
    status_code = 404
    message = "not found"


class InternalError(AppError):
    status_code = 500
    message = "internal error"


def field_errors(errors: Iterable[dict[str, Any]]) -> list[dict[str, str]]:
    """
    Convierte los errores de pydantic a [{field, message}] (uno por campo que falla).
    """
    out: list[dict[str, str]] = []
    for err in errors:
        # loc viene como ("body", "username") o ("founded_year",)
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
        out.append({"field": ".".join(loc) or "body", "message": err.get("msg", "invalid value")})
    return out


async def app_error_handler(request: Request, exc: AppError):
    return UTF8JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError):
    err = ValidationFailed(details=field_errors(exc.errors()))
    return UTF8JSONResponse(status_code=err.status_code, content=err.to_dict())


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = exc.detail if isinstance(exc.detail, str) else "request failed"
    if exc.status_code == 404 and detail == "Not Found":
        detail = "route not found"
    return UTF8JSONResponse(
        status_code=exc.status_code,
        content={"error": detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    log.exception(f"❌ Error no controlado en {request.method} {request.url.path}: {exc!r}")
    err = InternalError()
    return UTF8JSONResponse(status_code=err.status_code, content=err.to_dict())


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
