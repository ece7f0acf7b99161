"""Health check routes"""

from fastapi import APIRouter, Depends, Request
import logging

from adapters import mongo_adapter
from api.dependencies import ensure_db_connection, optional_db_connection
from api.responses import success_response
from app.config import settings

router = APIRouter(prefix="/health", tags=["Health"])
logger = logging.getLogger("chefenplace.api.health")


@router.get("", dependencies=[Depends(optional_db_connection)])
def health_check(request: Request):
    """Liveness check; reports the database without failing on it"""
    return {
        "status": "ok",
        "service": settings.app_name,
        "version": settings.app_version,
        "database": getattr(request.state, "db_connection_status", "unknown"),
    }


@router.get("/db", dependencies=[Depends(ensure_db_connection)])
def database_health():
    """Readiness check; 503 until the database connection is ready"""
    return success_response(
        mongo_adapter.get_connection_status(), "Database connection ready"
    )
