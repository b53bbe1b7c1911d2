"""
Query parsing.

A query is a space-separated list of terms. A term prefixed with a single
"-" is a minus-word: documents containing it are excluded. Other terms are
plus-words and contribute to relevance. Stop words are dropped whatever
their sign.
"""

import logging
from dataclasses import dataclass, field

from .errors import InvalidQueryError
from .tokenizer import StopWordSet, split_words, validate_word

logger = logging.getLogger(__name__)

MINUS = "-"


@dataclass(frozen=True)
class Query:
    plus_words: frozenset[str] = field(default_factory=frozenset)
    minus_words: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class QueryWord:
    data: str
    is_minus: bool
    is_stop: bool


def parse_query_word(text: str, stop_words: StopWordSet) -> QueryWord:
    is_minus = False
    if text.startswith(MINUS):
        is_minus = True
        text = text[1:]
        if not text:
            raise InvalidQueryError("Empty minus-word in query")
        if text.startswith(MINUS):
            raise InvalidQueryError(f"Double minus in query word: -{text!r}")
    validate_word(text)
    return QueryWord(text, is_minus, stop_words.is_stop_word(text))


def parse_query(text: str, stop_words: StopWordSet) -> Query:
    """
    Parse raw query text into deduplicated plus- and minus-word sets.
    Raises InvalidQueryError for "-" or "--word" terms and InvalidWordError
    for control characters.
    """
    plus_words: set[str] = set()
    minus_words: set[str] = set()
    for word in split_words(text):
        query_word = parse_query_word(word, stop_words)
        if query_word.is_stop:
            continue
        if query_word.is_minus:
            minus_words.add(query_word.data)
        else:
            plus_words.add(query_word.data)
    logger.debug("Parsed query %r: plus=%s minus=%s", text, sorted(plus_words), sorted(minus_words))
    return Query(frozenset(plus_words), frozenset(minus_words))
