"""
Sliding window of recent search requests.

Only the last REQUEST_WINDOW_SIZE requests are kept (one per minute of a day
by default); the window is count-based, not time-based.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING

from tfidf_search.config import REQUEST_WINDOW_SIZE
from tfidf_search.errors import InvalidInputError

if TYPE_CHECKING:
    from tfidf_search.documents import Document, DocumentStatus
    from tfidf_search.ranking import DocumentPredicate
    from tfidf_search.search_server import SearchServer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryResult:
    query: str
    results: int


class RequestQueue:
    """
    Forwards queries to a SearchServer and records how many documents each returned.

    Args:
        search_server (SearchServer): Server to query; not owned.
        window_size (int): Number of most recent requests to keep.
    """

    def __init__(self, search_server: SearchServer, window_size: int = REQUEST_WINDOW_SIZE):
        if window_size < 1:
            raise InvalidInputError(f"window_size must be positive, got {window_size}")
        self._server = search_server
        self._requests: deque[QueryResult] = deque(maxlen=window_size)

    @property
    def window_size(self) -> int:
        return self._requests.maxlen

    def __len__(self) -> int:
        return len(self._requests)

    @property
    def requests(self) -> tuple[QueryResult, ...]:
        return tuple(self._requests)

    def add_find_request(
        self,
        raw_query: str,
        status_or_predicate: DocumentStatus | DocumentPredicate | None = None,
    ) -> list[Document]:
        """Same arguments and result as ``SearchServer.find_top_documents``."""
        documents = self._server.find_top_documents(raw_query, status_or_predicate)
        self._add_result(raw_query, len(documents))
        return documents

    def get_no_result_requests(self) -> int:
        """Number of kept requests that returned no documents."""
        return sum(1 for request in self._requests if request.results == 0)

    def _add_result(self, raw_query: str, results: int) -> None:
        if len(self._requests) == self.window_size:
            logger.debug("Request %r left the window", self._requests[0].query)
        self._requests.append(QueryResult(raw_query, results))
