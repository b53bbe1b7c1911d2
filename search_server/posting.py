"""
Posting and inverted index data structures.

A posting represents a word's occurrence in a document: the document id and
the word's term frequency there (occurrences / content-word count).
"""

from collections import Counter
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Posting:
    doc_id: int
    tf: float


def compute_term_frequencies(words: list[str]) -> dict[str, float]:
    """
    Map each distinct word to count / len(words).
    An empty word list has no frequencies.
    """
    if not words:
        return {}
    inv_word_count = 1.0 / len(words)
    return {word: count * inv_word_count for word, count in Counter(words).items()}


class InvertedIndex:
    """
    Inverted index: map from word -> {doc_id: tf}.
    Documents are added whole; a word is only present while some document
    contains it.
    """

    def __init__(self) -> None:
        self._index: dict[str, dict[int, float]] = {}
        self._doc_words: dict[int, dict[str, float]] = {}

    def add_document(self, doc_id: int, term_freqs: dict[str, float]) -> None:
        """
        Write the postings of one document (no duplicate check).
        Each word's postings stay in ascending doc_id order; an id below the
        word's current maximum re-sorts that word once, at write time.
        """
        for word, tf in term_freqs.items():
            doc_freqs = self._index.setdefault(word, {})
            in_order = not doc_freqs or doc_id > next(reversed(doc_freqs))
            doc_freqs[doc_id] = tf
            if not in_order:
                self._index[word] = dict(sorted(doc_freqs.items()))
        self._doc_words[doc_id] = dict(term_freqs)

    def get_postings(self, word: str) -> list[Posting]:
        """Return the postings for a word sorted by doc_id, or empty list."""
        return [Posting(doc_id, tf) for doc_id, tf in self._index.get(word, {}).items()]

    def term_frequency(self, word: str, doc_id: int) -> float | None:
        return self._index.get(word, {}).get(doc_id)

    def document_frequency(self, word: str) -> int:
        """Number of documents containing word."""
        return len(self._index.get(word, ()))

    def word_frequencies(self, doc_id: int) -> dict[str, float]:
        """Return a copy of the word -> tf map of one document."""
        return dict(self._doc_words.get(doc_id, {}))

    def words(self) -> Iterator[str]:
        """Iterate over all words in the index."""
        return iter(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, word: str) -> bool:
        return word in self._index
