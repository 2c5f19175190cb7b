"""
Build the in-memory tweet index and print index analytics.
Optionally runs AND queries against the freshly built index.

Usage:
    python build_index.py --data data/twitter.csv \
        --query "side effects malaria vaccine" \
        --query "side effects covid vaccine"

Put the tab separated tweet export (id, user id, user name, text) in the
data/ folder, then run this script.
"""

import argparse
import logging
import sys
import time
from pathlib import Path

from tweetindex.config import DEFAULT_PROGRESS_EVERY, SEPARATOR, default_data_path
from tweetindex.index_builder import build_index_from_file
from tweetindex.search_cli import config_from_args, run_query


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Build the in-memory tweet index")
    parser.add_argument(
        "--data",
        type=Path,
        default=None,
        help="Path to the tweet file (default: data/twitter.csv)",
    )
    parser.add_argument(
        "--separator",
        default=SEPARATOR,
        help="Column separator (default: tab)",
    )
    parser.add_argument(
        "--progress-every",
        type=int,
        default=DEFAULT_PROGRESS_EVERY,
        help="Log indexing speed every N records (0 disables)",
    )
    parser.add_argument(
        "--stem",
        action="store_true",
        help="Apply Porter stemming to indexed and query terms",
    )
    parser.add_argument(
        "--strip-markup",
        action="store_true",
        help="Reduce HTML markup and entities to text before indexing",
    )
    parser.add_argument(
        "--query",
        action="append",
        default=[],
        help="Query to run after indexing (repeatable, AND semantics)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    data_path = args.data or default_data_path()
    if not data_path.is_file():
        print(f"No tweet file found at {data_path}. Put the export into the data/ folder.")
        sys.exit(1)

    config = config_from_args(args)
    started = time.monotonic()
    index, ids = build_index_from_file(data_path, config=config)
    elapsed = time.monotonic() - started

    print("\n" + "=" * 50)
    print("INDEX ANALYTICS")
    print("=" * 50)
    print()
    print("| Metric                      | Value |")
    print("|-----------------------------|-------|")
    print(f"| Number of indexed documents | {ids.count} |")
    print(f"| Number of unique terms      | {len(index)} |")
    print(f"| Build time (s)              | {elapsed:.2f} |")
    print()
    print("=" * 50)
    print(f"\nDictionary with {len(index)} items created successfully")

    for raw_query in args.query:
        print()
        run_query(index, ids, raw_query, config)


if __name__ == "__main__":
    main()
