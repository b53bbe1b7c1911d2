"""
Index builder: loads a directory of documents into a SearchServer.

Supported files (searched recursively, visited in sorted path order):
  - .json: {"content": str, "id": int?, "status": str?, "ratings": [int]?}
  - .html: visible text is indexed; status ACTUAL, no ratings.

Documents without an explicit id get the next id after the largest id seen
so far. A file that cannot be read or indexed is logged and skipped.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator

from .document import DocumentStatus
from .errors import SearchServerError
from .server import SearchServer
from .tokenizer import extract_text_from_html, read_text_file

logger = logging.getLogger(__name__)

DOCUMENT_SUFFIXES = (".json", ".html")


@dataclass
class DocumentSource:
    """One document as read from disk, before indexing."""

    path: Path
    content: str
    id: int | None = None
    status: DocumentStatus = DocumentStatus.ACTUAL
    ratings: list[int] = field(default_factory=list)


def _read_json_document(filepath: Path) -> DocumentSource:
    data = json.loads(filepath.read_text(encoding="utf-8"))
    if not isinstance(data, dict) or not isinstance(data.get("content"), str):
        raise ValueError(f"JSON file has no 'content' string: {filepath}")
    doc_id = data.get("id")
    if doc_id is not None and not isinstance(doc_id, int):
        raise ValueError(f"'id' must be an integer: {filepath}")
    status = data.get("status")
    if status is not None and not isinstance(status, str):
        raise ValueError(f"'status' must be a string: {filepath}")
    ratings = data.get("ratings", [])
    if not isinstance(ratings, list) or not all(isinstance(r, int) for r in ratings):
        raise ValueError(f"'ratings' must be a list of integers: {filepath}")
    return DocumentSource(
        path=filepath,
        content=data["content"],
        id=doc_id,
        status=DocumentStatus.parse(status) if status else DocumentStatus.ACTUAL,
        ratings=list(ratings),
    )


def read_document(filepath: Path) -> DocumentSource:
    """
    Read a document file.
    - .json: fields as described in the module docstring.
    - .html: extracted visible text.
    """
    filepath = Path(filepath)
    if filepath.suffix.lower() == ".json":
        return _read_json_document(filepath)
    html = read_text_file(filepath)
    return DocumentSource(path=filepath, content=extract_text_from_html(html))


def iter_document_files(data_dir: Path) -> Iterator[Path]:
    """Yield document files under data_dir in sorted path order."""
    data_dir = Path(data_dir)
    files = [p for p in data_dir.rglob("*") if p.is_file() and p.suffix.lower() in DOCUMENT_SUFFIXES]
    return iter(sorted(files, key=lambda p: str(p)))


@dataclass
class LoadReport:
    loaded: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)


def add_documents(
    server: SearchServer,
    sources: Iterable[DocumentSource],
) -> LoadReport:
    """
    Add documents to server. Sources without an id are numbered after the
    largest id seen so far (starting from the server's current ids).
    """
    report = LoadReport()
    next_doc_id = max(server, default=-1) + 1

    for source in sources:
        doc_id = source.id if source.id is not None else next_doc_id
        try:
            server.add_document(doc_id, source.content, source.status, source.ratings)
        except SearchServerError as e:
            logger.warning("Skipping %s: %s", source.path, e)
            report.skipped.append(source.path)
            continue
        next_doc_id = max(next_doc_id, doc_id + 1)
        report.loaded.append(source.path)

    return report


def build_server_from_directory(
    data_dir: Path,
    *,
    stop_words: str | Iterable[str] = (),
) -> tuple[SearchServer, LoadReport]:
    """
    Build a SearchServer from all .json/.html files in a directory (recursive).
    Returns (server, report of loaded and skipped files).
    """
    server = SearchServer(stop_words)
    sources: list[DocumentSource] = []
    unreadable: list[Path] = []

    for filepath in iter_document_files(data_dir):
        try:
            sources.append(read_document(filepath))
        except (OSError, ValueError) as e:
            logger.warning("Could not read %s: %s", filepath, e)
            unreadable.append(filepath)

    report = add_documents(server, sources)
    report.skipped = unreadable + report.skipped
    logger.info(
        "Loaded %d documents from %s (%d skipped)",
        len(report.loaded), data_dir, len(report.skipped),
    )
    return server, report
