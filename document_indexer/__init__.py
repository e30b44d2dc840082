"""
Document Indexer - in-memory full-text lookup of words across named documents.

This package keeps an inverted index from normalized words to the names of
the documents containing them, maintained incrementally as documents are
registered, replaced and removed.
"""

__version__ = "1.0.0"

from .core.index import IndexStore
from .core.engine import IndexEngine
from .models.response import QueryResponse

__all__ = [
    "IndexStore",
    "IndexEngine",
    "QueryResponse",
]
