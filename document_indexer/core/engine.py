"""Main index engine implementation."""

import threading
import time
from typing import Any, Dict, List, Mapping, Optional

import structlog

from ..models.response import QueryResponse
from .index import IndexStore

logger = structlog.get_logger(__name__)


class IndexEngine:
    """Facade over an ``IndexStore`` that tracks timings and query statistics."""

    def __init__(self, store: Optional[IndexStore] = None) -> None:
        """
        Initialize the engine.

        Args:
            store: Store to operate on; a fresh empty store if omitted
        """
        self.store = store if store is not None else IndexStore()
        self.normalizer = self.store.normalizer

        self._stats_lock = threading.Lock()
        self._stats = {
            "total_queries": 0,
            "query_hits": 0,
            "query_misses": 0,
            "total_registrations": 0,
            "total_removals": 0,
            "total_execution_time": 0.0,
        }

    def register_document(self, name: str, content: str) -> Dict[str, Any]:
        """
        Register a document, replacing any previous content under the same name.

        Args:
            name: Document name
            content: Document content

        Returns:
            Dictionary with the name, whether it replaced a document, and timing
        """
        start_time = time.time()
        replaced = self.store.register_document(name, content)
        execution_time = (time.time() - start_time) * 1000

        with self._stats_lock:
            self._stats["total_registrations"] += 1

        return {
            "name": name,
            "replaced": replaced,
            "execution_time_ms": execution_time,
        }

    def remove_document(self, name: str) -> Dict[str, Any]:
        """
        Remove a document. Removing an unknown name is not an error.

        Args:
            name: Document name

        Returns:
            Dictionary with the name, whether it was removed, and timing
        """
        start_time = time.time()
        removed = self.store.remove_document(name)
        execution_time = (time.time() - start_time) * 1000

        if removed:
            with self._stats_lock:
                self._stats["total_removals"] += 1

        return {
            "name": name,
            "removed": removed,
            "execution_time_ms": execution_time,
        }

    def query(self, word: str) -> QueryResponse:
        """
        Find documents containing a word.

        Args:
            word: Word to look up

        Returns:
            QueryResponse with sorted document names and metadata
        """
        start_time = time.time()
        documents = self.store.query(word)
        execution_time = (time.time() - start_time) * 1000

        with self._stats_lock:
            self._stats["total_queries"] += 1
            self._stats["total_execution_time"] += execution_time
            if documents:
                self._stats["query_hits"] += 1
            else:
                self._stats["query_misses"] += 1

        return QueryResponse(
            query=word,
            normalized_query=self.normalizer.normalize(word),
            documents=sorted(documents),
            total_documents=len(documents),
            execution_time_ms=execution_time,
        )

    def load_documents(self, documents: Mapping[str, str]) -> int:
        """
        Register every document in a name-to-content mapping.

        Args:
            documents: Mapping of document name to content

        Returns:
            Number of documents registered
        """
        for name, content in documents.items():
            self.register_document(name, content)

        logger.info("Documents loaded", total_documents=len(documents))
        return len(documents)

    def clean_all(self) -> None:
        """Remove every document from the index."""
        self.store.clean_all()
        logger.info("Index cleared")

    def get_document(self, name: str) -> Optional[str]:
        """Get stored content for a document."""
        return self.store.get_document(name)

    def list_documents(self) -> List[str]:
        """Get all registered document names."""
        return self.store.list_documents()

    def get_stats(self) -> Dict[str, Any]:
        """Get engine and index statistics."""
        with self._stats_lock:
            stats = self._stats.copy()

        if stats["total_queries"] > 0:
            stats["average_execution_time_ms"] = (
                stats["total_execution_time"] / stats["total_queries"]
            )
        else:
            stats["average_execution_time_ms"] = 0.0

        stats["index_stats"] = self.store.get_stats()
        return stats

    def reset_stats(self) -> None:
        """Reset query statistics."""
        with self._stats_lock:
            for key in self._stats:
                self._stats[key] = 0.0 if key == "total_execution_time" else 0
