"""Metrics and monitoring API endpoints."""

from datetime import datetime, timezone

import psutil
from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ..models.response import MetricsResponse

router = APIRouter(prefix="/api/v1", tags=["metrics"])

# Import the global index engine instance
from ..engine_instance import index_engine


def _hit_rate(stats: dict) -> float:
    total_queries = stats.get("total_queries", 0)
    if total_queries == 0:
        return 0.0
    return stats.get("query_hits", 0) / total_queries * 100


@router.get(
    "/metrics",
    response_model=MetricsResponse,
    summary="Get performance metrics",
    description="Get query statistics, index size and process memory usage"
)
async def get_metrics() -> MetricsResponse:
    """Get query statistics, index size and process memory usage."""
    try:
        stats = index_engine.get_stats()
        index_stats = stats["index_stats"]

        memory_usage_mb = psutil.Process().memory_info().rss / (1024 * 1024)

        return MetricsResponse(
            total_queries=stats["total_queries"],
            average_response_time_ms=stats["average_execution_time_ms"],
            hit_rate=_hit_rate(stats),
            total_documents=index_stats["total_documents"],
            total_tokens=index_stats["total_tokens"],
            memory_usage_mb=memory_usage_mb
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get metrics: {str(e)}"
        )


@router.get(
    "/metrics/detailed",
    summary="Get detailed metrics",
    description="Get query, index and system metrics broken down by category"
)
async def get_detailed_metrics() -> JSONResponse:
    """
    Get detailed metrics broken down by category.

    Includes query hit/miss counts, registration and removal counts,
    index sizes, and system resource usage of the host.
    """
    try:
        stats = index_engine.get_stats()
        index_stats = stats["index_stats"]

        memory_info = psutil.virtual_memory()
        process_memory = psutil.Process().memory_info()

        return JSONResponse(
            status_code=200,
            content={
                "query_metrics": {
                    "total_queries": stats["total_queries"],
                    "query_hits": stats["query_hits"],
                    "query_misses": stats["query_misses"],
                    "hit_rate": _hit_rate(stats),
                    "average_response_time_ms": stats["average_execution_time_ms"],
                    "total_execution_time_ms": stats["total_execution_time"]
                },
                "index_metrics": {
                    "total_documents": index_stats["total_documents"],
                    "total_tokens": index_stats["total_tokens"],
                    "total_postings": index_stats["total_postings"],
                    "total_registrations": stats["total_registrations"],
                    "total_removals": stats["total_removals"],
                    "last_updated": index_stats["last_updated"]
                },
                "system_metrics": {
                    "process_memory_mb": process_memory.rss / (1024 * 1024),
                    "memory_usage_percent": memory_info.percent,
                    "cpu_usage_percent": psutil.cpu_percent(interval=None),
                    "available_memory_mb": memory_info.available / (1024 * 1024)
                },
                "timestamp": datetime.now(timezone.utc).isoformat()
            }
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get detailed metrics: {str(e)}"
        )
