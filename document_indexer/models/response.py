"""Response models for API endpoints."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class QueryResponse(BaseModel):
    """Response for word queries."""

    query: str = Field(..., description="Original query word")
    normalized_query: str = Field(..., description="Query word after case folding")
    documents: List[str] = Field(..., description="Names of documents containing the word, sorted")
    total_documents: int = Field(..., description="Number of matching documents")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    timestamp: datetime = Field(default_factory=_utcnow, description="Response timestamp")


class DocumentResponse(BaseModel):
    """Response for document registration and removal."""

    name: str = Field(..., description="Document name")
    replaced: Optional[bool] = Field(None, description="Whether an existing document was replaced")
    removed: Optional[bool] = Field(None, description="Whether a document was removed")
    execution_time_ms: float = Field(..., description="Operation execution time in milliseconds")
    timestamp: datetime = Field(default_factory=_utcnow, description="Response timestamp")


class DocumentContentResponse(BaseModel):
    """Stored content of a single document."""

    name: str = Field(..., description="Document name")
    content: str = Field(..., description="Document content as registered")


class DocumentListResponse(BaseModel):
    """List of registered documents."""

    documents: List[str] = Field(..., description="Registered document names, sorted")
    total_documents: int = Field(..., description="Number of registered documents")


class BatchRegisterResponse(BaseModel):
    """Response for bulk registration."""

    message: str = Field(..., description="Result message")
    total_documents: int = Field(..., description="Number of documents registered")
    execution_time_ms: float = Field(..., description="Operation execution time in milliseconds")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=_utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(default_factory=_utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Dependency status")


class MetricsResponse(BaseModel):
    """Performance metrics response."""

    total_queries: int = Field(..., description="Total queries processed")
    average_response_time_ms: float = Field(..., description="Average query time")
    hit_rate: float = Field(..., description="Percentage of queries with at least one match")
    total_documents: int = Field(..., description="Registered documents")
    total_tokens: int = Field(..., description="Distinct indexed tokens")
    memory_usage_mb: float = Field(..., description="Resident memory of this process in MB")
    timestamp: datetime = Field(default_factory=_utcnow, description="Metrics timestamp")
