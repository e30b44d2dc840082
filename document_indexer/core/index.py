"""Index store keeping documents and their inverted word index consistent."""

import threading
import time
from typing import Any, Dict, List, Optional, Set

import structlog

from .normalizer import TextNormalizer

logger = structlog.get_logger(__name__)


def _require_str(value: Any, field: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{field} must be a str, not {type(value).__name__}")
    return value


class IndexStore:
    """
    In-memory store of named documents and the words they contain.

    The store owns two mappings that always change together: document name
    to content, and normalized token to the set of document names whose
    content produces that token. Every operation holds the same lock, so a
    reader never sees one mapping updated without the other.
    """

    def __init__(self, normalizer: Optional[TextNormalizer] = None) -> None:
        """
        Initialize an empty store.

        Args:
            normalizer: Tokenization rules; a default ``TextNormalizer`` if omitted
        """
        self.normalizer = normalizer if normalizer is not None else TextNormalizer()
        self._documents: Dict[str, str] = {}
        self._postings: Dict[str, Set[str]] = {}
        self._lock = threading.RLock()
        self._last_updated: Optional[float] = None

    def register_document(self, name: str, content: str) -> bool:
        """
        Register a document, replacing any document with the same name.

        Args:
            name: Document identifier (the empty string is valid)
            content: Document text

        Returns:
            True if an existing document was replaced, False otherwise
        """
        _require_str(name, "name")
        _require_str(content, "content")
        tokens = self.normalizer.tokenize(content)

        with self._lock:
            replaced = self._remove_locked(name)

            self._documents[name] = content
            for token in tokens:
                self._postings.setdefault(token, set()).add(name)

            self._last_updated = time.time()

        logger.debug(
            "Document registered",
            document=name,
            token_count=len(tokens),
            replaced=replaced,
        )
        return replaced

    def remove_document(self, name: str) -> bool:
        """
        Remove a document and all of its index entries.

        Args:
            name: Document identifier

        Returns:
            True if removed, False if not found
        """
        _require_str(name, "name")

        with self._lock:
            removed = self._remove_locked(name)
            if removed:
                self._last_updated = time.time()

        if removed:
            logger.debug("Document removed", document=name)
        return removed

    def query(self, word: str) -> Set[str]:
        """
        Find the documents containing a word.

        Args:
            word: Word to look up, normalized like indexed content

        Returns:
            New set of document names, empty if the word is not indexed
        """
        token = self.normalizer.normalize(_require_str(word, "word"))
        if not token:
            return set()

        with self._lock:
            return set(self._postings.get(token, ()))

    def clean_all(self) -> None:
        """Discard every document and index entry."""
        with self._lock:
            self._documents.clear()
            self._postings.clear()
            self._last_updated = time.time()

        logger.debug("Index cleared")

    def get_document(self, name: str) -> Optional[str]:
        """Get stored content for a document, or None if it is not registered."""
        _require_str(name, "name")
        with self._lock:
            return self._documents.get(name)

    def list_documents(self) -> List[str]:
        """Get all registered document names, sorted."""
        with self._lock:
            return sorted(self._documents)

    def get_stats(self) -> Dict[str, Any]:
        """Get index statistics."""
        with self._lock:
            return {
                "total_documents": len(self._documents),
                "total_tokens": len(self._postings),
                "total_postings": sum(len(names) for names in self._postings.values()),
                "last_updated": self._last_updated,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._documents)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._documents

    def _remove_locked(self, name: str) -> bool:
        # Caller holds self._lock.
        content = self._documents.pop(name, None)
        if content is None:
            return False

        for token in self.normalizer.tokenize(content):
            names = self._postings.get(token)
            if names is None:
                continue
            names.discard(name)
            if not names:
                del self._postings[token]

        return True
