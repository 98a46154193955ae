"""
TF-IDF ranking over the inverted index.

    relevance(d, q) = sum over plus-words t in d of tf(t, d) * ln(N / df(t))

Documents containing any minus-word are dropped after scoring, whatever the
predicate said. Results are ordered by relevance, then by rating when two
relevances are within RELEVANCE_EPSILON of each other.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
from functools import cmp_to_key
from typing import TYPE_CHECKING

from tfidf_search.config import MAX_RESULT_DOCUMENT_COUNT, RELEVANCE_EPSILON
from tfidf_search.documents import Document, DocumentStatus

if TYPE_CHECKING:
    from tfidf_search.documents import DocumentStore
    from tfidf_search.index import InvertedIndex
    from tfidf_search.query import Query

# predicate(document_id, status, rating) -> keep?
DocumentPredicate = Callable[[int, DocumentStatus, int], bool]


def find_all_documents(
    query: Query,
    index: InvertedIndex,
    store: DocumentStore,
    predicate: DocumentPredicate,
) -> list[Document]:
    """
    Score every document matching at least one plus-word and no minus-word.

    Plus-words are visited in sorted order and documents in ascending id order
    so the floating-point sums do not depend on set iteration order.

    Returns:
        Unsorted Documents in ascending id order.
    """
    document_to_relevance: dict[int, float] = defaultdict(float)
    idf = index.inverse_document_frequency(sorted(query.plus_words))
    for word, inverse_document_freq in idf.items():
        for document_id, term_freq in sorted(index.postings(word).items()):
            data = store.get(document_id)
            if predicate(document_id, data.status, data.rating):
                document_to_relevance[document_id] += term_freq * inverse_document_freq

    for word in query.minus_words:
        for document_id in index.postings(word):
            document_to_relevance.pop(document_id, None)

    return [
        Document(document_id, relevance, store.get(document_id).rating)
        for document_id, relevance in sorted(document_to_relevance.items())
    ]


def compare_documents(lhs: Document, rhs: Document) -> int:
    """Descending relevance; descending rating for near-equal relevance."""
    if abs(lhs.relevance - rhs.relevance) < RELEVANCE_EPSILON:
        return rhs.rating - lhs.rating
    return -1 if lhs.relevance > rhs.relevance else 1


def sort_documents(documents: list[Document]) -> list[Document]:
    return sorted(documents, key=cmp_to_key(compare_documents))


def select_top_documents(
    documents: list[Document],
    top_k: int | None = MAX_RESULT_DOCUMENT_COUNT,
) -> list[Document]:
    """
    Sort and truncate.

    Args:
        documents: Scored documents in any order
        top_k: Number of results to keep (None for all)

    Returns:
        At most ``top_k`` documents, best first
    """
    ranked = sort_documents(documents)
    if top_k is not None:
        ranked = ranked[:top_k]
    return ranked
