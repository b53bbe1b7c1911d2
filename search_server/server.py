"""
SearchServer: the in-memory index and the operations callers use on it.

One SearchServer owns its stop words, document records and inverted index.
Adding documents mutates that state; searching and matching only read it.
There is no internal locking: callers that share a server across threads
must not search while a document is being added.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from .document import (
    DocumentRecord,
    DocumentStatus,
    DocumentStore,
    RankedDocument,
    compute_average_rating,
)
from .errors import DocumentIndexError, DocumentNotFoundError, InvalidArgumentError
from .posting import InvertedIndex, compute_term_frequencies
from .query import Query, parse_query
from .ranking import (
    DEFAULT_STATUS,
    DocumentPredicate,
    rank_documents_tf_idf,
    status_predicate,
)
from .tokenizer import StopWordSet, split_words, split_words_no_stop

logger = logging.getLogger(__name__)


class SearchServer:
    """
    TF-IDF search over documents added with add_document().

    stop_words may be a space-separated string or an iterable of words.
    """

    def __init__(self, stop_words: str | Iterable[str] = ()) -> None:
        self._stop_words = StopWordSet()
        self._documents = DocumentStore()
        self._index = InvertedIndex()
        if isinstance(stop_words, str):
            self.configure_stop_words(stop_words)
        else:
            self._stop_words.configure(stop_words)

    @property
    def stop_words(self) -> StopWordSet:
        return self._stop_words

    @property
    def index(self) -> InvertedIndex:
        return self._index

    def configure_stop_words(self, text: str) -> None:
        """Add the space-separated words of text to the stop words."""
        self._stop_words.configure(split_words(text))

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus,
        ratings: Iterable[int],
    ) -> None:
        """
        Index a document.
        Raises InvalidArgumentError for a negative or already used id or a
        status that is not a DocumentStatus, and InvalidWordError if a word
        contains a control character. Nothing is stored when any error is
        raised, including a TypeError from non-numeric ratings.
        """
        if document_id < 0:
            raise InvalidArgumentError(f"Negative document id: {document_id}")
        if document_id in self._documents:
            raise InvalidArgumentError(f"Duplicate document id: {document_id}")

        if not isinstance(status, DocumentStatus):
            raise InvalidArgumentError(f"Invalid document status: {status!r}")

        # Everything that can fail happens before the first write.
        words = split_words_no_stop(document, self._stop_words)
        term_freqs = compute_term_frequencies(words)
        record = DocumentRecord(document_id, compute_average_rating(ratings), status)

        self._index.add_document(document_id, term_freqs)
        self._documents.add(record)
        logger.debug(
            "Added document %d (%s): %d content words", document_id, status.name, len(words)
        )

    def parse_query(self, raw_query: str) -> Query:
        return parse_query(raw_query, self._stop_words)

    def find_top_documents(
        self,
        raw_query: str,
        predicate: DocumentPredicate | DocumentStatus = DEFAULT_STATUS,
    ) -> list[RankedDocument]:
        """
        Return up to MAX_RESULT_DOCUMENT_COUNT documents ranked by tf-idf.

        predicate is either a callable (document_id, status, rating) -> bool
        selecting candidate documents, or a DocumentStatus to select on.
        Raises InvalidQueryError / InvalidWordError for malformed queries.
        """
        if isinstance(predicate, DocumentStatus):
            predicate = status_predicate(predicate)
        query = self.parse_query(raw_query)
        results = rank_documents_tf_idf(
            query,
            self._index,
            self._get_record,
            n_docs=self.get_document_count(),
            predicate=predicate,
        )
        logger.debug("Query %r: %d results", raw_query, len(results))
        return results

    def match_document(
        self, raw_query: str, document_id: int
    ) -> tuple[list[str], DocumentStatus]:
        """
        Return the query's plus-words present in a document (sorted) and the
        document's status. The word list is empty if the document contains
        any minus-word.
        Raises InvalidArgumentError for a negative id and
        DocumentNotFoundError for an unknown one.
        """
        if document_id < 0:
            raise InvalidArgumentError(f"Negative document id: {document_id}")
        record = self._get_record(document_id)
        query = self.parse_query(raw_query)

        for word in query.minus_words:
            if self._index.term_frequency(word, document_id) is not None:
                return [], record.status

        matched_words = [
            word
            for word in sorted(query.plus_words)
            if self._index.term_frequency(word, document_id) is not None
        ]
        return matched_words, record.status

    def get_document_count(self) -> int:
        return len(self._documents)

    def get_document_id(self, index: int) -> int:
        """Return the id at a zero-based position in ascending-id order."""
        if not 0 <= index < len(self._documents):
            raise DocumentIndexError(
                f"Document index {index} out of range [0, {len(self._documents)})"
            )
        return self._documents.id_at(index)

    def get_word_frequencies(self, document_id: int) -> dict[str, float]:
        """Return the word -> tf map of a document ({} if it has no content words)."""
        self._get_record(document_id)
        return self._index.word_frequencies(document_id)

    def get_document(self, document_id: int) -> DocumentRecord:
        return self._get_record(document_id)

    def _get_record(self, document_id: int) -> DocumentRecord:
        record = self._documents.get(document_id)
        if record is None:
            raise DocumentNotFoundError(document_id)
        return record

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[int]:
        return iter(self._documents)
