"""Request models for API endpoints."""

from typing import Dict

from pydantic import BaseModel, Field, field_validator


class DocumentRequest(BaseModel):
    """Request model for registering a document by name."""

    name: str = Field(..., description="Document name; the empty string is allowed")
    content: str = Field(..., description="Document content; may be empty")


class DocumentContentRequest(BaseModel):
    """Request model for registering content under a name given in the path."""

    content: str = Field(..., description="Document content; may be empty")


class BatchRegisterRequest(BaseModel):
    """Request model for registering several documents at once."""

    documents: Dict[str, str] = Field(..., description="Mapping of document name to content")

    @field_validator('documents')
    @classmethod
    def validate_documents(cls, v: Dict[str, str]) -> Dict[str, str]:
        """Reject an empty batch."""
        if not v:
            raise ValueError("Documents mapping cannot be empty")
        return v
