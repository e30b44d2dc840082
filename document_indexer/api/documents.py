"""Document registration and removal API endpoints."""

import time

import structlog
from fastapi import APIRouter, HTTPException, Path

from ..models.request import BatchRegisterRequest, DocumentContentRequest, DocumentRequest
from ..models.response import (
    BatchRegisterResponse,
    DocumentContentResponse,
    DocumentListResponse,
    DocumentResponse,
)
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["documents"])
settings = get_settings()
logger = structlog.get_logger(__name__)

# Import the global index engine instance
from ..engine_instance import index_engine


def _check_content_length(content: str) -> None:
    if len(content) > settings.max_content_length:
        raise HTTPException(
            status_code=400,
            detail=f"Content too long. Maximum length is {settings.max_content_length} characters"
        )


@router.post(
    "/documents",
    response_model=DocumentResponse,
    summary="Register a document",
    description="Register a document by name, replacing any document with the same name"
)
async def register_document(request: DocumentRequest) -> DocumentResponse:
    """
    Register a document from a JSON body.

    The body form accepts any name, including the empty string.
    """
    _check_content_length(request.content)

    result = index_engine.register_document(request.name, request.content)
    logger.info("Document registered", document=request.name, replaced=result["replaced"])
    return DocumentResponse(**result)


@router.put(
    "/documents/{name}",
    response_model=DocumentResponse,
    summary="Register a document under a path name",
    description="Register or replace the document named in the path"
)
async def put_document(
    request: DocumentContentRequest,
    name: str = Path(..., description="Document name")
) -> DocumentResponse:
    """Register or replace the document named in the path."""
    _check_content_length(request.content)

    result = index_engine.register_document(name, request.content)
    logger.info("Document registered", document=name, replaced=result["replaced"])
    return DocumentResponse(**result)


@router.post(
    "/documents/batch",
    response_model=BatchRegisterResponse,
    summary="Register many documents",
    description="Register every document in a name-to-content mapping"
)
async def register_batch(request: BatchRegisterRequest) -> BatchRegisterResponse:
    """
    Register several documents in one call.

    Documents already registered under the same names are replaced.
    """
    if len(request.documents) > settings.max_batch_size:
        raise HTTPException(
            status_code=400,
            detail=f"Batch too large. Maximum size is {settings.max_batch_size} documents"
        )

    for content in request.documents.values():
        _check_content_length(content)

    start_time = time.time()
    total = index_engine.load_documents(request.documents)
    execution_time = (time.time() - start_time) * 1000

    return BatchRegisterResponse(
        message="Documents registered successfully",
        total_documents=total,
        execution_time_ms=execution_time,
    )


@router.get(
    "/documents",
    response_model=DocumentListResponse,
    summary="List documents",
    description="Get the names of all registered documents"
)
async def list_documents() -> DocumentListResponse:
    """Get the names of all registered documents."""
    documents = index_engine.list_documents()
    return DocumentListResponse(documents=documents, total_documents=len(documents))


@router.get(
    "/documents/{name}",
    response_model=DocumentContentResponse,
    summary="Get a document",
    description="Get the stored content of a registered document"
)
async def get_document(
    name: str = Path(..., description="Document name")
) -> DocumentContentResponse:
    """Get the stored content of a registered document."""
    content = index_engine.get_document(name)
    if content is None:
        raise HTTPException(
            status_code=404,
            detail=f"Document '{name}' not found"
        )

    return DocumentContentResponse(name=name, content=content)


@router.delete(
    "/documents/{name}",
    response_model=DocumentResponse,
    summary="Remove a document",
    description="Remove a document and its index entries; unknown names are ignored"
)
async def remove_document(
    name: str = Path(..., description="Document name")
) -> DocumentResponse:
    """
    Remove a document from the index.

    Removing a name that is not registered succeeds with ``removed`` false.
    """
    result = index_engine.remove_document(name)
    logger.info("Document removal requested", document=name, removed=result["removed"])
    return DocumentResponse(**result)


@router.delete(
    "/documents",
    summary="Remove all documents",
    description="Discard every document and index entry"
)
async def clean_all() -> dict:
    """Discard every document and index entry."""
    index_engine.clean_all()
    return {"message": "All documents removed"}
