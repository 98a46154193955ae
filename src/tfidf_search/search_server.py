"""
SearchServer: document storage, stop words and ranked keyword search.

Usage:
    server = SearchServer("and in on")
    server.add_document(1, "white cat and fancy collar", DocumentStatus.ACTUAL, [8, -3])
    server.find_top_documents("fluffy cat -collar")
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
import logging

from tfidf_search.documents import (
    Document,
    DocumentData,
    DocumentStatus,
    DocumentStore,
    compute_average_rating,
)
from tfidf_search.errors import InvalidInputError
from tfidf_search.index import InvertedIndex
from tfidf_search.log_duration import LogDuration
from tfidf_search.query import Query, QueryParser
from tfidf_search.ranking import DocumentPredicate, find_all_documents, select_top_documents
from tfidf_search.tokenizer import is_valid_word, make_unique_non_empty_strings, split_into_words

logger = logging.getLogger(__name__)


def _status_predicate(status: DocumentStatus) -> DocumentPredicate:
    def predicate(document_id: int, document_status: DocumentStatus, rating: int) -> bool:
        return document_status == status

    return predicate


class SearchServer:
    """
    In-memory full-text search over short documents.

    Args:
        stop_words (str | Iterable[str]): Whitespace-separated text or a collection of
            words excluded from indexing and from queries.

    Raises:
        InvalidInputError: If a stop word contains a control character.
    """

    def __init__(self, stop_words: str | Iterable[str] = ""):
        self._stop_words: set[str] = set()
        self._index = InvertedIndex()
        self._documents = DocumentStore()
        self._parser = QueryParser(self.is_stop_word)
        if isinstance(stop_words, str):
            self.set_stop_words(stop_words)
        else:
            self._add_stop_words(make_unique_non_empty_strings(stop_words))

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[int]:
        return iter(self._documents)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    @property
    def stop_words(self) -> frozenset[str]:
        return frozenset(self._stop_words)

    def is_stop_word(self, word: str) -> bool:
        return word in self._stop_words

    def set_stop_words(self, text: str) -> None:
        """Adds the words of ``text`` to the stop words; indexed documents are untouched."""
        self._add_stop_words(split_into_words(text))

    def _add_stop_words(self, words: Iterable[str]) -> None:
        words = list(words)
        invalid = [word for word in words if not is_valid_word(word)]
        if invalid:
            raise InvalidInputError(
                f"Stop words must not contain characters with codes 0 to 31: {invalid!r}"
            )
        self._stop_words.update(words)
        if words:
            logger.debug("Stop words extended to %d words", len(self._stop_words))

    def split_into_words_no_stop(self, text: str) -> list[str]:
        return [word for word in split_into_words(text) if not self.is_stop_word(word)]

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus = DocumentStatus.ACTUAL,
        ratings: Sequence[int] = (),
    ) -> None:
        """
        Index a document. Nothing is stored unless every check passes.

        Raises:
            InvalidInputError: Negative or duplicate id, control characters in a
                word, or no words left after stop-word removal.
        """
        if document_id < 0:
            raise InvalidInputError(f"Document id must be non-negative, got {document_id}")
        if document_id in self._documents:
            raise InvalidInputError(f"Document {document_id} already exists")

        words = self.split_into_words_no_stop(document)
        for word in words:
            if not is_valid_word(word):
                raise InvalidInputError(
                    f"Document {document_id} has a word with characters with codes 0 to 31: {word!r}"
                )
        if not words:
            raise InvalidInputError(f"Document {document_id} has no words besides stop words")

        self._index.add_document(document_id, words)
        self._documents.add(document_id, DocumentData(compute_average_rating(ratings), status))
        logger.debug("Added document %d with %d words", document_id, len(words))

    def remove_document(self, document_id: int) -> None:
        """Removes the document; unknown ids are ignored."""
        if document_id not in self._documents:
            return
        self._index.remove_document(document_id)
        self._documents.remove(document_id)
        logger.debug("Removed document %d", document_id)

    def find_top_documents(
        self,
        raw_query: str,
        status_or_predicate: DocumentStatus | DocumentPredicate | None = None,
    ) -> list[Document]:
        """
        Best matching documents for ``raw_query``.

        Args:
            raw_query: Plus-words and ``-``prefixed minus-words
            status_or_predicate: A status to filter on, a ``predicate(id, status, rating)``,
                or None for ``DocumentStatus.ACTUAL``

        Returns:
            At most MAX_RESULT_DOCUMENT_COUNT documents, best first

        Raises:
            InvalidQueryError: If the query is malformed.
        """
        if status_or_predicate is None:
            predicate = _status_predicate(DocumentStatus.ACTUAL)
        elif isinstance(status_or_predicate, DocumentStatus):
            predicate = _status_predicate(status_or_predicate)
        else:
            predicate = status_or_predicate

        query = self._parser.parse(raw_query)
        documents = select_top_documents(
            find_all_documents(query, self._index, self._documents, predicate)
        )
        logger.debug("Query %r returned %d documents", raw_query, len(documents))
        return documents

    def match_document(self, raw_query: str, document_id: int) -> tuple[list[str], DocumentStatus]:
        """
        Plus-words of the query found in the document, with its status.

        The word list is empty if any minus-word occurs in the document.

        Raises:
            InvalidQueryError: If the query is malformed.
            DocumentNotFoundError: If ``document_id`` is unknown.
        """
        with LogDuration(f"match_document({document_id})"):
            query: Query = self._parser.parse(raw_query)
            status = self._documents.get(document_id).status
            if any(self._index.contains(word, document_id) for word in query.minus_words):
                return [], status
            matched_words = [
                word for word in sorted(query.plus_words) if self._index.contains(word, document_id)
            ]
            return matched_words, status

    def get_word_frequencies(self, document_id: int) -> Mapping[str, float]:
        """Word -> term-frequency share; empty for unknown ids."""
        return self._index.word_frequencies(document_id)

    def get_document_id(self, position: int) -> int:
        """Id of the document at ``position`` in insertion order."""
        return self._documents.id_at(position)

    def document_count(self) -> int:
        return len(self._documents)
