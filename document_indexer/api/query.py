"""Word query API endpoints."""

from fastapi import APIRouter, HTTPException, Path, Query

from ..models.response import QueryResponse
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["query"])
settings = get_settings()

# Import the global index engine instance
from ..engine_instance import index_engine


def _run_query(word: str) -> QueryResponse:
    if len(word) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )

    return index_engine.query(word)


@router.get(
    "/query/{word}",
    response_model=QueryResponse,
    summary="Find documents containing a word",
    description="Case-insensitive lookup of the documents whose content contains the word"
)
async def query_word(
    word: str = Path(..., description="The word to look up")
) -> QueryResponse:
    """
    Find the documents containing a word.

    Matching is exact on the case-folded word; a word that was never
    indexed yields an empty document list rather than an error.
    """
    return _run_query(word)


@router.get(
    "/query",
    response_model=QueryResponse,
    summary="Find documents containing a word (query string)",
    description="Same as /query/{word} but accepts the empty word"
)
async def query_word_param(
    word: str = Query("", description="The word to look up")
) -> QueryResponse:
    """Find the documents containing a word passed as a query parameter."""
    return _run_query(word)
