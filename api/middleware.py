"""
Request logging and exception handlers for the Pawnder attribute API.

Every error leaves the service in the ErrorResponse shape from
api.responses, whatever raised it.
"""

import time
import logging
from uuid import uuid4
from decimal import Decimal

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from api.responses import error_response
from app.exceptions import ServiceError

logger = logging.getLogger("pawnder.middleware")


def make_serializable(obj):
    """Decimals become floats so error details stay plain JSON numbers"""
    if isinstance(obj, Decimal):
        return float(obj)
    if isinstance(obj, dict):
        return {k: make_serializable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [make_serializable(item) for item in obj]
    return obj


def _json_error(status_code: int, code: str, message: str, details=None) -> JSONResponse:
    body = error_response(code, message, details=make_serializable(details) if details else None)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Tag each request with an id and log its outcome and duration.

    The id and the elapsed seconds are echoed back in ``X-Request-ID`` and
    ``X-Process-Time``.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = uuid4().hex
        request.state.request_id = request_id
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                f"request_failed request_id={request_id} method={request.method} "
                f"path={request.url.path} elapsed={time.perf_counter() - started:.4f}s"
            )
            raise

        elapsed = time.perf_counter() - started
        logger.info(
            f"request_completed request_id={request_id} method={request.method} "
            f"path={request.url.path} status={response.status_code} elapsed={elapsed:.4f}s"
        )
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        return response


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies, paths and query strings (422)"""
    errors = jsonable_encoder(exc.errors())
    logger.warning(f"request_invalid path={request.url.path} errors={len(errors)}")
    # Literal status: the constant's name differs across Starlette releases
    return _json_error(422, "VALIDATION_ERROR", "Request validation failed", {"errors": errors})


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    logger.warning(f"http_error path={request.url.path} status={exc.status_code} detail={exc.detail!r}")
    return _json_error(exc.status_code, f"HTTP_{exc.status_code}", str(exc.detail))


async def service_exception_handler(request: Request, exc: ServiceError):
    """Typed service errors carry their own status and code"""
    logger.warning(
        f"service_error path={request.url.path} type={exc.__class__.__name__} "
        f"code={exc.code} message={exc.message!r}"
    )
    details = dict(exc.details) if exc.details else None
    return _json_error(exc.http_status, exc.code, exc.message, details)


async def general_exception_handler(request: Request, exc: Exception):
    logger.exception(f"unhandled_error path={request.url.path} error={exc!r}")
    return _json_error(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_SERVER_ERROR",
        "An unexpected error occurred",
    )
