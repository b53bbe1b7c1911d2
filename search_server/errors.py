"""
Error types raised by the search server.

Every error carries an ErrorKind tag so callers can dispatch on a single
attribute instead of on the concrete class.
"""

from enum import Enum


class ErrorKind(Enum):
    INVALID_ARGUMENT = "invalid_argument"
    INVALID_WORD = "invalid_word"
    INVALID_QUERY = "invalid_query"
    OUT_OF_RANGE = "out_of_range"
    NOT_FOUND = "not_found"


class SearchServerError(Exception):
    """Base class for all search server errors."""

    kind: ErrorKind


class InvalidArgumentError(SearchServerError, ValueError):
    """Negative or duplicate document id."""

    kind = ErrorKind.INVALID_ARGUMENT


class InvalidWordError(SearchServerError, ValueError):
    """A word contains a control character."""

    kind = ErrorKind.INVALID_WORD

    def __init__(self, word: str) -> None:
        super().__init__(f"Word contains a control character: {word!r}")
        self.word = word


class InvalidQueryError(SearchServerError, ValueError):
    """Malformed minus-term in a query ("-" alone or "--word")."""

    kind = ErrorKind.INVALID_QUERY


class DocumentIndexError(SearchServerError, IndexError):
    kind = ErrorKind.OUT_OF_RANGE


class DocumentNotFoundError(SearchServerError, LookupError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, document_id: int) -> None:
        super().__init__(f"Document not found: {document_id}")
        self.document_id = document_id
