"""Exceptions raised by the search server."""


class SearchServerError(Exception):
    """Base class for all search server errors."""


class InvalidInputError(SearchServerError, ValueError):
    """A document, stop word or argument was rejected before any state changed."""


class InvalidQueryError(SearchServerError, ValueError):
    """A raw query failed syntax validation."""

    def __init__(self, raw_query: str, word: str):
        self.raw_query = raw_query
        self.word = word
        super().__init__(
            f"Invalid query word {word!r} in {raw_query!r}: query words must not contain "
            "characters with codes 0 to 31, a lone '-' or more than one leading '-'"
        )


class DocumentNotFoundError(SearchServerError, LookupError):
    """The requested document id does not exist."""

    def __init__(self, document_id: int, message: str | None = None):
        self.document_id = document_id
        super().__init__(message or f"Document {document_id} does not exist")


class DocumentPositionError(SearchServerError, IndexError):
    """No document at the given insertion-order position."""

    def __init__(self, position: int, document_count: int):
        self.position = position
        self.document_count = document_count
        super().__init__(f"No document at position {position} (have {document_count})")
