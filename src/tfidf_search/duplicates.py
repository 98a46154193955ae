"""
Duplicate detection: two documents are duplicates when they index exactly the
same set of words, regardless of order, repetitions or stop words.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tfidf_search.log_duration import LogDuration

if TYPE_CHECKING:
    from tfidf_search.search_server import SearchServer

logger = logging.getLogger(__name__)


def find_duplicates(search_server: SearchServer) -> list[int]:
    """Ids of documents whose word set repeats that of an earlier-inserted document."""
    seen: set[frozenset[str]] = set()
    duplicates: list[int] = []
    for document_id in search_server:
        words = frozenset(search_server.get_word_frequencies(document_id))
        if words in seen:
            duplicates.append(document_id)
        else:
            seen.add(words)
    return duplicates


@LogDuration("remove_duplicates")
def remove_duplicates(search_server: SearchServer) -> list[int]:
    """Removes duplicates, keeping the first-inserted document of each group."""
    duplicates = find_duplicates(search_server)
    for document_id in duplicates:
        logger.info("Found duplicate document id %d", document_id)
        search_server.remove_document(document_id)
    return duplicates
