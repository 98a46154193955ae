"""
In-memory inverted index with a forward (document -> word) mirror.

Both views hold the same term-frequency shares; every mutation updates both
before returning, so lookups by word (ranking) and by document (removal,
word frequencies) always agree.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

import numpy as np


class InvertedIndex:
    """
    Term-frequency shares keyed by word and by document id.

    The share of a word in a document is its occurrence count divided by the
    document's total number of (non stop) words, so shares of one document sum to 1.
    """

    def __init__(self):
        self._word_to_document_freqs: dict[str, dict[int, float]] = {}
        self._document_to_word_freqs: dict[int, dict[str, float]] = {}

    def __contains__(self, word: object) -> bool:
        return word in self._word_to_document_freqs

    @property
    def document_count(self) -> int:
        return len(self._document_to_word_freqs)

    @property
    def vocabulary_size(self) -> int:
        return len(self._word_to_document_freqs)

    def add_document(self, document_id: int, words: list[str]) -> None:
        """Indexes ``words``; the caller guarantees a new id and a non-empty list."""
        inverse_word_count = 1.0 / len(words)
        word_freqs = self._document_to_word_freqs.setdefault(document_id, {})
        for word in words:
            document_freqs = self._word_to_document_freqs.setdefault(word, {})
            document_freqs[document_id] = document_freqs.get(document_id, 0.0) + inverse_word_count
            word_freqs[word] = word_freqs.get(word, 0.0) + inverse_word_count

    def remove_document(self, document_id: int) -> bool:
        """Drops the document from both views. Returns False if it was not indexed."""
        word_freqs = self._document_to_word_freqs.pop(document_id, None)
        if word_freqs is None:
            return False
        for word in word_freqs:
            document_freqs = self._word_to_document_freqs[word]
            del document_freqs[document_id]
            if not document_freqs:
                del self._word_to_document_freqs[word]
        return True

    def postings(self, word: str) -> Mapping[int, float]:
        """Document id -> term-frequency share for ``word`` (empty if unknown)."""
        return MappingProxyType(self._word_to_document_freqs.get(word, {}))

    def word_frequencies(self, document_id: int) -> Mapping[str, float]:
        """Word -> term-frequency share for the document (empty if unknown)."""
        return MappingProxyType(self._document_to_word_freqs.get(document_id, {}))

    def contains(self, word: str, document_id: int) -> bool:
        return document_id in self._word_to_document_freqs.get(word, ())

    def document_frequency(self, word: str) -> int:
        """Number of documents containing ``word``."""
        return len(self._word_to_document_freqs.get(word, ()))

    def inverse_document_frequency(self, words: Iterable[str]) -> dict[str, float]:
        """
        IDF for each indexed word:
            idf(t) = ln(N / df(t))

        Words absent from the index are skipped, so df is never zero.
        """
        known = [word for word in words if word in self._word_to_document_freqs]
        if not known:
            return {}
        df_values = np.array([self.document_frequency(word) for word in known], dtype=float)
        idf = np.log(self.document_count / df_values)
        return {word: float(idf_value) for word, idf_value in zip(known, idf)}
