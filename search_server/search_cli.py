"""
Interactive search console.

Loads a directory of documents (see index_builder) into an in-memory
SearchServer, then reads queries line by line and prints the top results.

Usage:
    search-server --data data/ --stop-words "in the and"
    python -m search_server.search_cli --data data/ --status banned --explain
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Iterable

from .document import DocumentStatus
from .errors import SearchServerError
from .index_builder import build_server_from_directory
from .server import SearchServer
from .tokenizer import load_nltk_stop_words, split_words


def print_stats(server: SearchServer) -> None:
    """Print index analytics."""
    by_status = {status: 0 for status in DocumentStatus}
    for doc_id in server:
        by_status[server.get_document(doc_id).status] += 1

    print("| Metric                  | Value |")
    print("|-------------------------|-------|")
    print(f"| Indexed documents       | {server.get_document_count()} |")
    print(f"| Unique words            | {len(server.index)} |")
    print(f"| Stop words              | {len(server.stop_words)} |")
    for status, count in by_status.items():
        print(f"| Status {status.name:<17} | {count} |")


def run_query(
    server: SearchServer,
    raw_query: str,
    status: DocumentStatus,
    explain: bool = False,
) -> None:
    """Run one query and print its results."""
    try:
        results = server.find_top_documents(raw_query, status)
    except SearchServerError as e:
        print(f"Invalid query: {e}")
        return

    if not results:
        print("No documents matched the query.")
        return

    for document in results:
        print(document)
        if explain:
            words, doc_status = server.match_document(raw_query, document.id)
            print(f"    matched: {' '.join(words)}  status: {doc_status.name}")


def run_search_loop(
    server: SearchServer,
    status: DocumentStatus = DocumentStatus.ACTUAL,
    explain: bool = False,
) -> None:
    """
    Interactive command-line search loop.
    """
    print(f"Loaded {server.get_document_count()} documents.")
    print("Enter queries (prefix a word with - to exclude it). Empty line or Ctrl+C to exit.")

    while True:
        try:
            raw_query = input("query> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not raw_query:
            break
        run_query(server, raw_query, status, explain=explain)


def _collect_stop_words(args: argparse.Namespace) -> list[str]:
    stop_words: list[str] = []
    if args.stop_words:
        stop_words.extend(split_words(args.stop_words))
    if args.nltk_stopwords:
        stop_words.extend(load_nltk_stop_words(args.nltk_stopwords))
    return stop_words


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="In-memory TF-IDF search console.")
    parser.add_argument(
        "--data",
        type=Path,
        default=Path("data"),
        help="Directory of .json/.html documents to index.",
    )
    parser.add_argument(
        "--stop-words",
        default="",
        help="Space-separated stop words.",
    )
    parser.add_argument(
        "--nltk-stopwords",
        metavar="LANG",
        default=None,
        help="Also use nltk's stop-word list for this language (e.g. english).",
    )
    parser.add_argument(
        "--status",
        type=DocumentStatus.parse,
        default=DocumentStatus.ACTUAL,
        help="Only return documents with this status (default: actual).",
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Print the matched query words for each result.",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print index analytics and exit.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.data.is_dir():
        parser.exit(1, f"No data folder found: {args.data}\n")

    try:
        stop_words = _collect_stop_words(args)
    except (OSError, LookupError) as e:
        parser.exit(1, f"Could not load nltk stop words for {args.nltk_stopwords!r}: {e}\n")

    try:
        server, _report = build_server_from_directory(args.data, stop_words=stop_words)
    except SearchServerError as e:
        parser.exit(1, f"Invalid stop words: {e}\n")

    if args.stats:
        print_stats(server)
        return

    run_search_loop(server, status=args.status, explain=args.explain)


if __name__ == "__main__":
    main()
