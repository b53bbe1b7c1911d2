"""In-memory TF-IDF search server package."""

from .document import DocumentStatus, DocumentRecord, RankedDocument
from .errors import (
    ErrorKind,
    SearchServerError,
    InvalidArgumentError,
    InvalidWordError,
    InvalidQueryError,
    DocumentIndexError,
    DocumentNotFoundError,
)
from .query import Query
from .ranking import MAX_RESULT_DOCUMENT_COUNT
from .server import SearchServer
from .index_builder import build_server_from_directory
