"""
Tests for word splitting, validation, stop words and loader text sources.
"""
import pytest

import nltk.corpus

from search_server import tokenizer
from search_server.errors import ErrorKind, InvalidWordError
from search_server.tokenizer import (
    StopWordSet,
    extract_text_from_html,
    split_words,
    split_words_no_stop,
    validate_word,
)


def test_split_words_drops_empty_fragments():
    assert split_words("  cat  in the city ") == ["cat", "in", "the", "city"]
    assert split_words("") == []
    assert split_words("   ") == []


def test_split_words_only_splits_on_spaces():
    # Tabs are not separators; they end up inside the word.
    assert split_words("cat\tdog bird") == ["cat\tdog", "bird"]


def test_validate_word_accepts_unicode_and_punctuation():
    validate_word("пушистый")
    validate_word("e-mail")
    validate_word("c++")


@pytest.mark.parametrize("word", ["ca\x12t", "\x00", "cat\t", "\x1f"])
def test_validate_word_rejects_control_characters(word):
    with pytest.raises(InvalidWordError) as exc_info:
        validate_word(word)
    assert exc_info.value.kind is ErrorKind.INVALID_WORD
    assert exc_info.value.word == word


def test_stop_word_set_ignores_duplicates_and_empty():
    stop_words = StopWordSet(["in", "the", "in", ""])

    assert len(stop_words) == 2
    assert stop_words.is_stop_word("in")
    assert "the" in stop_words
    assert not stop_words.is_stop_word("cat")
    assert list(stop_words) == ["in", "the"]


def test_stop_word_set_invalid_word_leaves_set_unchanged():
    stop_words = StopWordSet(["in"])

    with pytest.raises(InvalidWordError):
        stop_words.configure(["the", "a\x01"])

    assert list(stop_words) == ["in"]


def test_split_words_no_stop():
    stop_words = StopWordSet(["in", "the"])

    assert split_words_no_stop("cat in the city", stop_words) == ["cat", "city"]
    assert split_words_no_stop("in the", stop_words) == []


def test_split_words_no_stop_validates_every_word():
    with pytest.raises(InvalidWordError):
        split_words_no_stop("cat ci\x02ty", StopWordSet())


def test_extract_text_from_html_strips_scripts_and_whitespace():
    html = (
        "<html><head><title>Pets</title><script>var x = 1;</script></head>"
        "<body><p>white\n  cat</p><style>p {}</style></body></html>"
    )

    text = extract_text_from_html(html)

    assert "white cat" in text
    assert "Pets" in text
    assert "var" not in text
    assert "\n" not in text


def test_load_nltk_stop_words(monkeypatch):
    requested = []

    class FakeStopwords:
        def words(self, language):
            requested.append(language)
            return ["and", "the"]

    monkeypatch.setattr(tokenizer, "_nltk_download", lambda *args, **kwargs: True)
    monkeypatch.setattr(nltk.corpus, "stopwords", FakeStopwords())

    assert tokenizer.load_nltk_stop_words("english") == ["and", "the"]
    assert requested == ["english"]
