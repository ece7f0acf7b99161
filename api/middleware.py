"""
Consolidated middleware for the Chef en Place API
"""

import time
import logging
from datetime import datetime, timezone
from uuid import uuid4

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from api.responses import error_response, SIGNUP_ERROR_CODES
from app.exceptions import ServiceValidationError, DatabaseUnavailableError

logger = logging.getLogger("chefenplace.middleware")


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def _error_json(message: str, code=None, status_code: int = 400, **extra) -> JSONResponse:
    status_code, body = error_response(message, code, status_code)
    body.update(extra)
    body["timestamp"] = _timestamp()
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


# ============================================================================
# Request Logging Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all HTTP requests and responses"""

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid4())
        request.state.request_id = request_id

        logger.info(
            "Request started",
            extra={
                "request_id": request_id,
                "method": request.method,
                "url": str(request.url),
                "client": request.client.host if request.client else None,
            },
        )

        start_time = time.time()

        try:
            response: Response = await call_next(request)
            process_time = time.time() - start_time

            logger.info(
                "Request completed",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "url": str(request.url),
                    "status_code": response.status_code,
                    "process_time": f"{process_time:.4f}s",
                },
            )

            response.headers["X-Request-ID"] = request_id
            response.headers["X-Process-Time"] = f"{process_time:.4f}"

            return response

        except Exception as exc:
            process_time = time.time() - start_time
            logger.error(
                "Request failed",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "url": str(request.url),
                    "error": str(exc),
                    "process_time": f"{process_time:.4f}s",
                },
                exc_info=True,
            )
            raise


# ============================================================================
# Error Handlers
# ============================================================================


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors"""
    logger.warning(f"Validation error on {request.url}: {exc.errors()}")

    return _error_json(
        "Request validation failed",
        None,
        422,
        errors=[
            {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
            for err in exc.errors()
        ],
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions"""
    logger.warning(f"HTTP {exc.status_code} on {request.url}: {exc.detail}")

    return _error_json(str(exc.detail), None, exc.status_code)


async def service_exception_handler(request: Request, exc: ServiceValidationError):
    """Handle service errors; the status comes from the exception class"""
    logger.warning(f"Service error on {request.url}: {str(exc)}")

    extra = {"details": exc.details} if exc.details else {}
    return _error_json(exc.message, exc.code, exc.http_status, **extra)


async def database_unavailable_handler(request: Request, exc: DatabaseUnavailableError):
    """Render the connection gate's 503 body with a Retry-After header"""
    logger.error(f"Database unavailable on {request.url}: {exc.error}")

    body = exc.to_dict()
    body["timestamp"] = _timestamp()
    return JSONResponse(
        status_code=exc.http_status,
        content=body,
        headers={"Retry-After": str(exc.retry_after)},
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception(f"Unexpected error on {request.url}: {str(exc)}")

    return _error_json(
        "An unexpected error occurred",
        SIGNUP_ERROR_CODES.INTERNAL_ERROR,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
