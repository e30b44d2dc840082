"""API endpoints for the document indexer."""

from .documents import router as documents_router
from .query import router as query_router
from .health import router as health_router
from .metrics import router as metrics_router

__all__ = [
    "documents_router",
    "query_router",
    "health_router",
    "metrics_router",
]
