"""Core indexing functionality."""

from .engine import IndexEngine
from .index import IndexStore
from .normalizer import TextNormalizer

__all__ = [
    "IndexEngine",
    "IndexStore",
    "TextNormalizer",
]
