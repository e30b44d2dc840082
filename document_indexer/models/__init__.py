"""Data models for the document indexer."""

from .response import (
    QueryResponse,
    DocumentResponse,
    DocumentContentResponse,
    DocumentListResponse,
    BatchRegisterResponse,
    ErrorResponse,
    HealthResponse,
    MetricsResponse,
)
from .request import DocumentRequest, DocumentContentRequest, BatchRegisterRequest

__all__ = [
    "QueryResponse",
    "DocumentResponse",
    "DocumentContentResponse",
    "DocumentListResponse",
    "BatchRegisterResponse",
    "ErrorResponse",
    "HealthResponse",
    "MetricsResponse",
    "DocumentRequest",
    "DocumentContentRequest",
    "BatchRegisterRequest",
]
