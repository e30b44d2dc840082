"""Health check and monitoring API endpoints."""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ..models.response import HealthResponse
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["health"])
settings = get_settings()

# Import the global index engine instance
from ..engine_instance import index_engine

# Track application start time
app_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the indexing service"
)
async def health_check() -> HealthResponse:
    """
    Perform a health check on the indexing service.

    The index store is probed with a lookup of a word that is normally
    absent, which takes the store lock without touching state.
    """
    uptime = time.time() - app_start_time

    dependencies = {
        "index_store": "healthy",
        "normalizer": "healthy",
    }

    try:
        index_engine.store.query("health")
    except Exception:
        dependencies["index_store"] = "unhealthy"

    try:
        index_engine.normalizer.tokenize("Health check")
    except Exception:
        dependencies["normalizer"] = "unhealthy"

    if all(status == "healthy" for status in dependencies.values()):
        status = "healthy"
    else:
        status = "unhealthy"

    return HealthResponse(
        status=status,
        version=settings.app_version,
        uptime=uptime,
        dependencies=dependencies
    )


@router.get(
    "/health/ready",
    summary="Readiness check",
    description="Check if the service is ready to accept requests"
)
async def readiness_check() -> JSONResponse:
    """
    Check if the service is ready to accept requests.

    Used by load balancers and orchestration systems to decide whether
    to route traffic to this process.
    """
    try:
        index_stats = index_engine.store.get_stats()

        return JSONResponse(
            status_code=200,
            content={
                "status": "ready",
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "index_stats": index_stats
            }
        )

    except Exception as e:
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "error": str(e),
                "timestamp": datetime.now(timezone.utc).isoformat()
            }
        )


@router.get(
    "/health/live",
    summary="Liveness check",
    description="Check if the service is alive and responding"
)
async def liveness_check() -> JSONResponse:
    """Check if the service process is alive and responding."""
    return JSONResponse(
        status_code=200,
        content={
            "status": "alive",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "uptime": time.time() - app_start_time
        }
    )


@router.get(
    "/status",
    summary="Service status",
    description="Get detailed status information about the service"
)
async def service_status() -> JSONResponse:
    """Get status, configuration and statistics of the service."""
    try:
        stats = index_engine.get_stats()

        config_info = {
            "max_query_length": settings.max_query_length,
            "max_content_length": settings.max_content_length,
            "max_batch_size": settings.max_batch_size,
            "debug": settings.debug
        }

        return JSONResponse(
            status_code=200,
            content={
                "service": {
                    "name": settings.app_name,
                    "version": settings.app_version,
                    "status": "running",
                    "uptime": time.time() - app_start_time,
                    "start_time": datetime.fromtimestamp(app_start_time, timezone.utc).isoformat()
                },
                "configuration": config_info,
                "statistics": stats,
                "timestamp": datetime.now(timezone.utc).isoformat()
            }
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get service status: {str(e)}"
        )
