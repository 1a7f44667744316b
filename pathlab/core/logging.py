"""
Structured logging for the PathLab backend

Every event carries the service identity, and events emitted while a
request is being handled also carry that request's id, method and path.
"""

import logging
import sys
import time
import uuid
from typing import Any, Awaitable, Callable, Dict

import structlog
from fastapi import Request, Response
from structlog.typing import Processor

from pathlab.core.config import settings

REQUEST_ID_HEADER = "X-Request-ID"

_access_logger = structlog.get_logger("pathlab.access")


def add_app_context(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Add application context to log events"""
    event_dict["service"] = "pathlab-backend"
    event_dict["version"] = settings.VERSION
    event_dict["environment"] = settings.ENVIRONMENT
    return event_dict


def configure_logging() -> None:
    """Route structlog through the stdlib root logger at LOG_LEVEL"""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.processors.StackInfoRenderer(),
        add_app_context,
    ]

    if settings.is_development:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.extend([
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ])

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    # SQL statements are only wanted with DB_ECHO
    if not settings.DB_ECHO:
        for name in ("sqlalchemy.engine", "sqlalchemy.pool", "sqlalchemy.orm"):
            logging.getLogger(name).setLevel(logging.WARNING)


async def log_requests(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """
    HTTP middleware binding a request id to every log event of the request.

    The id comes from the ``X-Request-ID`` header when the client sends one
    and is echoed back on the response. The access line is written even when
    the handler raises; the error handler echoes the id in that case.
    """
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    request.state.request_id = request_id
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        request_id=request_id,
        method=request.method,
        path=request.url.path,
    )

    started = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
    finally:
        _access_logger.info(
            "Request completed",
            status_code=status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        structlog.contextvars.clear_contextvars()


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance"""
    return structlog.get_logger(name)
