"""
Document records: the public search result and the per-id data kept by the store.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum

from tfidf_search.errors import DocumentNotFoundError, DocumentPositionError


class DocumentStatus(Enum):
    ACTUAL = "actual"
    IRRELEVANT = "irrelevant"
    BANNED = "banned"
    REMOVED = "removed"


@dataclass(frozen=True)
class Document:
    """
    A single search result.

    Attributes:
        id (int): Document id as given to ``SearchServer.add_document``.
        relevance (float): Summed TF-IDF score for the query.
        rating (int): Mean of the document's ratings, truncated toward zero.
    """

    id: int
    relevance: float = 0.0
    rating: int = 0

    def __str__(self) -> str:
        return f"{{ document_id = {self.id}, relevance = {self.relevance}, rating = {self.rating} }}"


@dataclass(frozen=True)
class DocumentData:
    rating: int
    status: DocumentStatus


def compute_average_rating(ratings: Sequence[int]) -> int:
    """
    Integer mean of the ratings, truncated toward zero (``[8, -3]`` gives 2).

    Returns 0 for an empty sequence.
    """
    if len(ratings) == 0:
        return 0
    total = sum(ratings)
    quotient = abs(total) // len(ratings)
    return quotient if total >= 0 else -quotient


class DocumentStore:
    """
    Rating and status per document id, plus the ids in insertion order.
    """

    def __init__(self):
        self._documents: dict[int, DocumentData] = {}
        self._ids: list[int] = []

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    def __iter__(self) -> Iterator[int]:
        return iter(self._ids)

    def add(self, document_id: int, data: DocumentData) -> None:
        self._documents[document_id] = data
        self._ids.append(document_id)

    def remove(self, document_id: int) -> None:
        del self._documents[document_id]
        self._ids.remove(document_id)

    def get(self, document_id: int) -> DocumentData:
        try:
            return self._documents[document_id]
        except KeyError:
            raise DocumentNotFoundError(document_id) from None

    def id_at(self, position: int) -> int:
        if not 0 <= position < len(self._ids):
            raise DocumentPositionError(position, len(self._ids))
        return self._ids[position]
