"""
TF-IDF ranking.

Score(d) = sum_{w in plus-words} tf(w, d) * idf(w)
where idf(w) = ln(N / df_w), N = number of indexed documents.

Only documents accepted by the predicate are scored; any document holding a
minus-word is dropped afterwards, whether or not it passed the predicate.
"""

import math
from functools import cmp_to_key
from typing import Callable

from .document import DocumentRecord, DocumentStatus, RankedDocument
from .posting import InvertedIndex
from .query import Query

# Maximum number of documents returned by a search
MAX_RESULT_DOCUMENT_COUNT = 5

# Relevances closer than this are ordered by rating instead
RELEVANCE_EPSILON = 1e-6

DEFAULT_STATUS = DocumentStatus.ACTUAL

DocumentPredicate = Callable[[int, DocumentStatus, int], bool]


def status_predicate(status: DocumentStatus) -> DocumentPredicate:
    """Predicate accepting only documents with the given status."""

    def predicate(document_id: int, document_status: DocumentStatus, rating: int) -> bool:
        return document_status == status

    return predicate


def inverse_document_freq(index: InvertedIndex, word: str, n_docs: int) -> float:
    """ln(N / df). The word must be present in the index."""
    return math.log(n_docs / index.document_frequency(word))


def score_documents(
    query: Query,
    index: InvertedIndex,
    get_record: Callable[[int], DocumentRecord],
    n_docs: int,
    predicate: DocumentPredicate,
) -> dict[int, float]:
    """
    Accumulate tf-idf per document over the plus-words, then remove every
    document containing a minus-word.
    Plus-words are visited in sorted order so float sums are reproducible.
    """
    scores: dict[int, float] = {}
    for word in sorted(query.plus_words):
        if word not in index:
            continue
        idf = inverse_document_freq(index, word, n_docs)
        for p in index.get_postings(word):
            record = get_record(p.doc_id)
            if predicate(p.doc_id, record.status, record.rating):
                scores[p.doc_id] = scores.get(p.doc_id, 0.0) + p.tf * idf

    for word in query.minus_words:
        for p in index.get_postings(word):
            scores.pop(p.doc_id, None)

    return scores


def _compare_ranked(lhs: RankedDocument, rhs: RankedDocument) -> int:
    if abs(lhs.relevance - rhs.relevance) < RELEVANCE_EPSILON:
        return rhs.rating - lhs.rating
    return -1 if lhs.relevance > rhs.relevance else 1


def sort_ranked(documents: list[RankedDocument]) -> list[RankedDocument]:
    """
    Sort by descending relevance; near-equal relevances (within
    RELEVANCE_EPSILON) by descending rating. Stable otherwise.
    """
    return sorted(documents, key=cmp_to_key(_compare_ranked))


def rank_documents_tf_idf(
    query: Query,
    index: InvertedIndex,
    get_record: Callable[[int], DocumentRecord],
    n_docs: int,
    predicate: DocumentPredicate,
    top_k: int = MAX_RESULT_DOCUMENT_COUNT,
) -> list[RankedDocument]:
    """
    Score, sort and truncate. Returns at most top_k documents.
    """
    if n_docs <= 0:
        return []

    scores = score_documents(query, index, get_record, n_docs, predicate)
    ranked = [
        RankedDocument(doc_id, relevance, get_record(doc_id).rating)
        for doc_id, relevance in sorted(scores.items())
    ]
    return sort_ranked(ranked)[:top_k]
