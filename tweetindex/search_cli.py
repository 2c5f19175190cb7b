"""
Interactive search over a tweet file.

The index lives in memory only, so the file is indexed on startup, then
queries are read from the prompt. Query text goes through the same
preprocessing and normalization as the indexed text; all terms must match
(AND semantics).

Usage (from repo root):
    python -m tweetindex.search_cli --data data/twitter.csv
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List

from .config import DEFAULT_PROGRESS_EVERY, SEPARATOR, IndexerConfig, default_data_path
from .index_builder import build_index_from_file
from .normalizer import markup_to_text, normalize, preprocess, tokenize
from .postings import DocumentIdTable, InvertedIndex
from .query import query


def normalize_query(raw_query: str, config: IndexerConfig) -> List[str]:
    """
    Tokenize and normalize the raw query string using the same logic as
    indexing. Repeated terms are dropped.
    """
    if config.strip_markup:
        raw_query = markup_to_text(raw_query)
    tokens = normalize(tokenize(preprocess(raw_query)), config.rules())
    return list(dict.fromkeys(tokens))


def run_query(
    index: InvertedIndex,
    ids: DocumentIdTable,
    raw_query: str,
    config: IndexerConfig,
    top_k: int | None = None,
) -> None:
    """Run one query and print its results."""
    terms = normalize_query(raw_query, config)
    if not terms:
        print("No valid terms in query.")
        return

    results = query(index, ids, *terms)
    if not results:
        print("No documents matched all query terms.")
        return

    shown = results if top_k is None else results[:top_k]
    print(f"{len(results)} results for {' AND '.join(terms)}:")
    for rank, external_id in enumerate(shown, start=1):
        print(f"{rank:2d}. {external_id}")


def run_search_loop(
    index: InvertedIndex,
    ids: DocumentIdTable,
    config: IndexerConfig,
    top_k: int = 10,
) -> None:
    """
    Interactive command-line search loop.
    """
    print(f"Index holds {ids.count} documents and {len(index)} terms.")
    print("Enter queries (AND semantics). Empty line or Ctrl+C to exit.")

    while True:
        try:
            raw_query = input("query> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not raw_query:
            break
        run_query(index, ids, raw_query, config, top_k=top_k)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Boolean AND search over tweets.")
    parser.add_argument(
        "--data",
        type=Path,
        default=None,
        help="Path to the tab separated tweet file (default: data/twitter.csv).",
    )
    parser.add_argument(
        "--separator",
        default=SEPARATOR,
        help="Column separator of the tweet file (default: tab).",
    )
    parser.add_argument(
        "--progress-every",
        type=int,
        default=DEFAULT_PROGRESS_EVERY,
        help="Log indexing speed every N records (0 disables).",
    )
    parser.add_argument(
        "--stem",
        action="store_true",
        help="Apply Porter stemming to indexed and query terms.",
    )
    parser.add_argument(
        "--strip-markup",
        action="store_true",
        help="Reduce HTML markup and entities to text before indexing.",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=10,
        help="Number of results to show.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log indexing progress.",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> IndexerConfig:
    return IndexerConfig(
        separator=args.separator,
        progress_every=args.progress_every,
        stem=args.stem,
        strip_markup=args.strip_markup,
    )


def main(argv: Iterable[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = config_from_args(args)
    try:
        index, ids = build_index_from_file(args.data or default_data_path(), config=config)
    except FileNotFoundError as e:
        print(e)
        sys.exit(1)

    run_search_loop(index, ids, config, top_k=args.top)


if __name__ == "__main__":
    main()
