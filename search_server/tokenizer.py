"""
Word splitting and validation for the search server.
Words are runs of characters between single spaces; a word may not contain
control characters (code points below 0x20).
Also holds the stop-word set and the text sources used by the loader
(HTML visible text, nltk stop-word lists).
"""

import re
import warnings
from pathlib import Path
from typing import Iterable, Iterator

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

from nltk import download as _nltk_download

from .errors import InvalidWordError


def split_words(text: str) -> list[str]:
    """Split text on spaces, dropping empty fragments. Order is preserved."""
    return [word for word in text.split(" ") if word]


def is_valid_word(word: str) -> bool:
    return not any(ord(c) < 0x20 for c in word)


def validate_word(word: str) -> None:
    """Raise InvalidWordError if word contains a control character."""
    if not is_valid_word(word):
        raise InvalidWordError(word)


class StopWordSet:
    """
    Words excluded from indexing and from queries.
    Filled once by configure(); read-only afterwards.
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words: set[str] = set()
        self.configure(words)

    def configure(self, words: Iterable[str]) -> None:
        """Validate and add words. Duplicates and empty strings are ignored."""
        words = [w for w in words if w]
        # All-or-nothing: a bad word leaves the set untouched.
        for word in words:
            validate_word(word)
        self._words.update(words)

    def is_stop_word(self, word: str) -> bool:
        return word in self._words

    def __contains__(self, word: str) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __repr__(self) -> str:
        return f"StopWordSet({sorted(self._words)!r})"


def split_words_no_stop(text: str, stop_words: StopWordSet) -> list[str]:
    """
    Split text and drop stop words. Every word, stop word or not, is
    validated first so a failure never leaves half-processed output behind.
    """
    words = split_words(text)
    for word in words:
        validate_word(word)
    return [w for w in words if not stop_words.is_stop_word(w)]


def _ensure_stopwords_corpus():
    _nltk_download("stopwords", quiet=True)


def load_nltk_stop_words(language: str = "english") -> list[str]:
    """
    Return nltk's stop-word list for a language (e.g. "english", "russian").
    Downloads the stopwords corpus on first use.
    """
    _ensure_stopwords_corpus()
    from nltk.corpus import stopwords

    return stopwords.words(language)


def extract_text_from_html(html_content: str) -> str:
    """
    Extract visible text from HTML content, stripping tags and scripts.
    Whitespace runs (newlines, tabs) collapse to single spaces so the
    result splits cleanly into valid words.
    """
    soup = BeautifulSoup(html_content, "lxml")
    for element in soup(["script", "style"]):
        element.decompose()
    text = soup.get_text(separator=" ", strip=True)
    return re.sub(r"\s+", " ", text).strip()


def read_text_file(filepath: Path) -> str:
    """
    Read a text file, handling common encodings.
    """
    for encoding in ("utf-8", "latin-1", "cp1252"):
        try:
            return Path(filepath).read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    raise ValueError(f"Could not decode file: {filepath}")
