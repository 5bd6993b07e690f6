"""
Health check and system status API endpoints.
"""
import logging
from datetime import datetime, timezone
from typing import Dict, Any
from fastapi import APIRouter, Request
from ..config.settings import get_settings

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/health", summary="Health Check")
def health_check() -> Dict[str, Any]:
    """
    Basic health check endpoint.
    """
    settings = get_settings()
    return {
        "status": "healthy",
        "message": f"Welcome to {settings.app_name} v{settings.app_version}",
        "environment": settings.environment,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/health/detailed", summary="Detailed Health Check")
def detailed_health_check(request: Request) -> Dict[str, Any]:
    """
    Detailed health check with configuration and dashboard state.
    """
    settings = get_settings()
    table = getattr(request.app.state, "job_table", None)
    health_status = {
        "status": "healthy",
        "app_info": {
            "name": settings.app_name,
            "version": settings.app_version,
            "environment": settings.environment,
            "debug": settings.debug,
            "testing": settings.testing
        },
        "configuration": {
            "log_level": settings.log_level,
            "table_backend": settings.table_backend,
            "jobs_table_name": settings.jobs_table_name,
            "rest_configured": bool(settings.supabase_url and settings.supabase_key),
        },
        "dashboard": {
            "loaded": table is not None,
            "jobs_in_memory": len(table.jobs) if table is not None else 0,
            "dialog_open": bool(table and table.is_dialog_open),
        },
    }

    config_issues = settings.validate_required_settings()
    if config_issues:
        health_status["status"] = "degraded"
        health_status["configuration_issues"] = config_issues
        logger.warning("Configuration issues found: %s", config_issues)

    return health_status
