"""
Query validation and parsing.

A raw query is a whitespace-separated list of words. A leading '-' turns a
word into a minus-word: any document containing it is excluded. Stop words
are dropped from both sets.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
import logging

from tfidf_search.errors import InvalidQueryError
from tfidf_search.tokenizer import is_valid_word, split_into_words

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryWord:
    data: str
    is_minus: bool
    is_stop: bool


@dataclass
class Query:
    """
    Parsed query. A word may sit in both sets ("cat -cat"); minus-words win
    during ranking and matching.
    """

    plus_words: set[str] = field(default_factory=set)
    minus_words: set[str] = field(default_factory=set)


def is_query_word_correct(word: str) -> bool:
    """Rejects a lone '-', a '--' prefix and control characters."""
    if word == "-" or word.startswith("--"):
        return False
    return is_valid_word(word)


def validate_query(raw_query: str) -> None:
    """Raises InvalidQueryError on the first malformed word."""
    for word in split_into_words(raw_query):
        if not is_query_word_correct(word):
            raise InvalidQueryError(raw_query, word)


class QueryParser:
    """
    Turns raw query text into a Query.

    Args:
        is_stop_word (Callable[[str], bool]): Stop-word test, usually bound to a server's stop-word set.
    """

    def __init__(self, is_stop_word: Callable[[str], bool]):
        self._is_stop_word = is_stop_word

    def parse_word(self, text: str) -> QueryWord:
        is_minus = text.startswith("-")
        if is_minus:
            text = text[1:]
        return QueryWord(text, is_minus, self._is_stop_word(text))

    def parse(self, raw_query: str) -> Query:
        """Validates then parses ``raw_query``."""
        validate_query(raw_query)
        query = Query()
        for word in split_into_words(raw_query):
            query_word = self.parse_word(word)
            if query_word.is_stop:
                continue
            if query_word.is_minus:
                query.minus_words.add(query_word.data)
            else:
                query.plus_words.add(query_word.data)
        logger.debug(
            "Parsed query %r: plus=%s minus=%s",
            raw_query,
            sorted(query.plus_words),
            sorted(query.minus_words),
        )
        return query
