"""
Tests for the interactive search console.
"""
import json

import pytest

from search_server import search_cli
from search_server.document import DocumentStatus
from search_server.server import SearchServer


@pytest.fixture
def pets_server():
    server = SearchServer("и в на")
    server.add_document(0, "белый кот и модный ошейник", DocumentStatus.ACTUAL, [8, -3])
    server.add_document(1, "пушистый кот пушистый хвост", DocumentStatus.ACTUAL, [7, 2, 7])
    server.add_document(2, "ухоженный пёс выразительные глаза", DocumentStatus.ACTUAL, [5, -12, 2, 1])
    server.add_document(3, "ухоженный скворец евгений", DocumentStatus.BANNED, [9])
    return server


@pytest.fixture
def data_dir(tmp_path):
    docs = [
        {"id": 0, "content": "cat in the city", "ratings": [1, 2, 3]},
        {"id": 1, "content": "dog in the city", "status": "irrelevant"},
    ]
    for doc in docs:
        path = tmp_path / f"{doc['id']}.json"
        path.write_text(json.dumps(doc), encoding="utf-8")
    return tmp_path


def _feed_input(monkeypatch, lines):
    lines = iter(lines)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))


def test_run_query_prints_result_lines(pets_server, capsys):
    search_cli.run_query(pets_server, "пушистый ухоженный кот", DocumentStatus.ACTUAL)

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "{ document_id = 1, relevance = 0.866434, rating = 5 }"
    assert [line.split(",")[0] for line in lines] == [
        "{ document_id = 1",
        "{ document_id = 0",
        "{ document_id = 2",
    ]


def test_run_query_explain(pets_server, capsys):
    search_cli.run_query(pets_server, "ухоженный кот", DocumentStatus.BANNED, explain=True)

    out = capsys.readouterr().out
    assert "document_id = 3" in out
    assert "matched: ухоженный  status: BANNED" in out


def test_run_query_reports_invalid_query(pets_server, capsys):
    search_cli.run_query(pets_server, "кот --пёс", DocumentStatus.ACTUAL)

    assert "Invalid query" in capsys.readouterr().out


def test_run_query_no_results(pets_server, capsys):
    search_cli.run_query(pets_server, "попугай", DocumentStatus.ACTUAL)

    assert "No documents matched" in capsys.readouterr().out


def test_main_search_loop(data_dir, monkeypatch, capsys):
    _feed_input(monkeypatch, ["cat", "dog", ""])

    search_cli.main(["--data", str(data_dir), "--stop-words", "in the"])

    out = capsys.readouterr().out
    assert "Loaded 2 documents." in out
    assert "{ document_id = 0, relevance = 0.346574, rating = 2 }" in out
    # document 1 is irrelevant, so "dog" finds nothing with the default status
    assert "No documents matched" in out


def test_main_with_status(data_dir, monkeypatch, capsys):
    _feed_input(monkeypatch, ["dog", ""])

    search_cli.main(["--data", str(data_dir), "--stop-words", "in the", "--status", "irrelevant"])

    assert "document_id = 1" in capsys.readouterr().out


def test_main_stops_on_eof(data_dir, monkeypatch, capsys):
    def raise_eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", raise_eof)

    search_cli.main(["--data", str(data_dir)])

    assert "Loaded 2 documents." in capsys.readouterr().out


def test_main_stats(data_dir, monkeypatch, capsys):
    monkeypatch.setattr(search_cli, "load_nltk_stop_words", lambda language: ["in", "the", "of"])

    search_cli.main(["--data", str(data_dir), "--nltk-stopwords", "english", "--stats"])

    out = capsys.readouterr().out
    assert "| Indexed documents       | 2 |" in out
    assert "| Unique words            | 3 |" in out
    assert "| Stop words              | 3 |" in out
    assert "| Status IRRELEVANT        | 1 |" in out


def test_main_missing_data_dir(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        search_cli.main(["--data", str(tmp_path / "missing")])

    assert exc_info.value.code == 1


@pytest.mark.parametrize("error", [OSError("No such file or directory"), LookupError("Resource not found")])
def test_main_unknown_nltk_language(data_dir, monkeypatch, capsys, error):
    def fail(language):
        raise error

    monkeypatch.setattr(search_cli, "load_nltk_stop_words", fail)

    with pytest.raises(SystemExit) as exc_info:
        search_cli.main(["--data", str(data_dir), "--nltk-stopwords", "klingon"])

    assert exc_info.value.code == 1
    assert "klingon" in capsys.readouterr().err


def test_main_invalid_stop_words(data_dir):
    with pytest.raises(SystemExit) as exc_info:
        search_cli.main(["--data", str(data_dir), "--stop-words", "in t\x01he"])

    assert exc_info.value.code == 1
