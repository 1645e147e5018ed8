"""Error type raised by the services and the handlers that turn errors into
the ``{"code", "msg", "data"}`` envelope every endpoint answers with."""
import logging

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from .config import DEBUG

logger = logging.getLogger(__name__)


class AppError(Exception):
    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NotFoundError(AppError):
    def __init__(self, message: str = "Not found"):
        super().__init__(message, 404)


class AuthError(AppError):
    def __init__(self, message: str = "Not logged in"):
        super().__init__(message, 401)


class ForbiddenError(AppError):
    def __init__(self, message: str = "Forbidden"):
        super().__init__(message, 403)


class ConflictError(AppError):
    def __init__(self, message: str):
        super().__init__(message, 409)


def ok(data=None, msg: str = "success") -> dict:
    return {"code": 200, "msg": msg, "data": data}


def _fail(status_code: int, msg: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"code": status_code, "msg": msg, "data": None})


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(x) for x in err.get("loc", ()) if x not in ("body", "query", "path"))
        parts.append(f"{loc}: {err.get('msg')}" if loc else err.get("msg", "invalid value"))
    return ", ".join(parts) or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        level = logging.ERROR if exc.status_code >= 500 else logging.WARNING
        logger.log(level, f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
        return _fail(exc.status_code, exc.message)

    @app.exception_handler(HTTPException)
    async def http_error_handler(request: Request, exc: HTTPException):
        return _fail(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        msg = _validation_message(exc)
        logger.warning(f"{request.method} {request.url.path} -> 400: {msg}")
        return _fail(400, msg)

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        logger.warning(f"{request.method} {request.url.path} -> 409: {exc.orig}")
        return _fail(409, "Duplicate record")

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error in {request.method} {request.url.path}")
        return _fail(500, str(exc) if DEBUG else "Internal server error")
