"""
API dependencies for dependency injection
"""

import logging

import anyio
from fastapi import Request

from adapters import mongo_adapter
from app.config import settings
from app.exceptions import DatabaseUnavailableError

logger = logging.getLogger("chefenplace.api.dependencies")


async def ensure_db_connection(request: Request) -> None:
    """
    Connection-readiness gate for routes that need the database.

    Waits for the shared connection under a deadline and rejects the request
    with 503 when it is not ready in time or the connection failed.

    Usage:
        @router.get("/example", dependencies=[Depends(ensure_db_connection)])
        def example():
            ...
    """
    logger.debug("Database connection gate: %s %s", request.method, request.url.path)
    try:
        with anyio.fail_after(settings.db_gate_timeout_sec):
            await mongo_adapter.ensure_connection()
    except TimeoutError:
        logger.error("Database connection timeout on %s", request.url.path)
        raise DatabaseUnavailableError(
            "Database connection timeout",
            error="Connection attempt timed out",
            retry_after=settings.db_retry_after_sec,
        )
    except Exception as exc:
        logger.error("Database connection gate error: %s", exc)
        raise DatabaseUnavailableError(
            "Database service unavailable",
            error="Database connection failed",
            details=str(exc),
            retry_after=settings.db_retry_after_sec,
        )

    request.state.db_connection_status = "ready"


async def optional_db_connection(request: Request) -> None:
    """Like ensure_db_connection, but the request proceeds either way."""
    try:
        with anyio.fail_after(settings.db_gate_timeout_sec):
            await mongo_adapter.ensure_connection()
        request.state.db_connection_status = "ready"
    except Exception as exc:
        logger.warning("Optional database connection failed: %s", exc)
        request.state.db_connection_status = "failed"
