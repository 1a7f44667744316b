"""
Error taxonomy and the JSON failure envelope

Every failure leaves the API as ``{"success": false, "message": str}``
with one of the statuses 400, 404, 409 or 500.
"""

from typing import Any, Dict, List, Optional

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from starlette.exceptions import HTTPException

from pathlab.core.config import settings
from pathlab.core.logging import REQUEST_ID_HEADER

logger = structlog.get_logger(__name__)


class PathLabError(Exception):
    """Base class for errors surfaced to API callers"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(PathLabError):
    """Required field missing or malformed"""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class NotFoundError(PathLabError):
    """Target row does not exist"""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConflictError(PathLabError):
    """Duplicate natural key or a row still referenced elsewhere"""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class TransactionError(PathLabError):
    """A multi-statement write failed and was rolled back"""

    default_message = "Transaction failed"


class ConnectivityError(PathLabError):
    """Pool exhausted or database unreachable"""

    default_message = "Database unavailable"


def error_body(message: str) -> Dict[str, Any]:
    return {"success": False, "message": message}


def describe_validation_errors(errors: List[Dict[str, Any]]) -> str:
    """Turn pydantic error entries into one readable message"""
    missing: List[str] = []
    invalid: List[str] = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        name = ".".join(loc) or "body"
        if err.get("type") == "missing" or err.get("input", "") is None:
            missing.append(name)
        else:
            invalid.append(name)

    parts = []
    if missing:
        parts.append(f"Missing required fields ({', '.join(dict.fromkeys(missing))})")
    if invalid:
        parts.append(f"Invalid fields ({', '.join(dict.fromkeys(invalid))})")
    return "; ".join(parts) or "Invalid request"


async def pathlab_error_handler(request: Request, exc: PathLabError) -> JSONResponse:
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        "Request failed",
        path=request.url.path,
        method=request.method,
        status_code=exc.status_code,
        error=exc.message,
        error_type=type(exc).__name__,
    )
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = describe_validation_errors(exc.errors())
    logger.warning("Request validation failed", path=request.url.path, method=request.method, error=message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error_body(message))


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    logger.warning("HTTP error", path=request.url.path, status_code=exc.status_code, error=str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.warning("Integrity constraint violated", path=request.url.path, error=str(exc.orig))
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content=error_body("Conflicts with existing data or related records"),
    )


async def connectivity_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Database connectivity error", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(ConnectivityError.default_message),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    request_id = getattr(request.state, "request_id", None)
    logger.exception("Unhandled error", path=request.url.path, method=request.method, request_id=request_id)
    message = str(exc) if settings.is_development else PathLabError.default_message
    headers = {REQUEST_ID_HEADER: request_id} if request_id else None
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(message),
        headers=headers,
    )


def translate_db_error(exc: Exception) -> PathLabError:
    """Map a SQLAlchemy failure raised during a write to the taxonomy"""
    if isinstance(exc, PathLabError):
        return exc
    if isinstance(exc, PoolTimeoutError):
        return ConnectivityError("Timed out waiting for a database connection")
    if isinstance(exc, OperationalError) or (isinstance(exc, DBAPIError) and exc.connection_invalidated):
        return ConnectivityError(str(exc.orig) if getattr(exc, "orig", None) else str(exc))
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return TransactionError(str(exc.orig))
    return TransactionError(str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    """Install the failure envelope on every error path"""
    app.add_exception_handler(PathLabError, pathlab_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(PoolTimeoutError, connectivity_error_handler)
    app.add_exception_handler(OperationalError, connectivity_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
