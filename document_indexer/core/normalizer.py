"""Text normalization utilities for consistent word processing."""

import re
from typing import FrozenSet, List


class TextNormalizer:
    """Handles tokenization and normalization shared by indexing and querying."""

    def __init__(self) -> None:
        """Initialize the normalizer."""
        # A word is a maximal run of Unicode letters and digits. ``[^\W_]``
        # is ``\w`` without the underscore, i.e. exactly ``str.isalnum``.
        self.word_regex = re.compile(r'[^\W_]+')

    def normalize(self, word: str) -> str:
        """
        Normalize a single word for indexing or lookup.

        Args:
            word: Input word to normalize

        Returns:
            Case-folded word
        """
        if not isinstance(word, str):
            raise TypeError(f"word must be a str, not {type(word).__name__}")

        if not word:
            return ""

        return word.casefold()

    def split_words(self, text: str) -> List[str]:
        """
        Split text into raw word fragments, in order of appearance.

        Args:
            text: Input text

        Returns:
            List of non-empty fragments, not normalized
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be a str, not {type(text).__name__}")

        return self.word_regex.findall(text)

    def tokenize(self, text: str) -> FrozenSet[str]:
        """
        Tokenize text into the distinct normalized words it contains.

        Args:
            text: Input text

        Returns:
            Frozen set of normalized tokens
        """
        return frozenset(self.normalize(word) for word in self.split_words(text))
