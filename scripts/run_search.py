"""
CLI script to search a corpus of scanned books.

Usage:
    python scripts/run_search.py "the" data/twenty_leagues.json
    python scripts/run_search.py "Canadian's" data/ --json
    python scripts/run_search.py "the" data/ --output output/report.json
    python scripts/run_search.py "the" data/ --config path/to/config.json
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from book_search.core import get_config, get_logger, setup_logging_from_config, BookSearchError, ConfigurationError  # noqa: E402
from book_search.core.config_loader import reload_config  # noqa: E402
from book_search.corpus import CorpusLoader  # noqa: E402
from book_search.search import search, format_report_table, report_to_json, write_report  # noqa: E402


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find the ISBN, page and line of every scanned line containing a term"
    )

    parser.add_argument(
        "term",
        help="Exact, case-sensitive text to search for; spaces count"
    )

    parser.add_argument(
        "corpus",
        help="JSON corpus file, scanned PDF, or directory of either"
    )

    parser.add_argument(
        "--output",
        type=str,
        help="Write the JSON report to this file"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the JSON report instead of a table"
    )

    parser.add_argument(
        "--allow-empty",
        action="store_true",
        help="Allow an empty term, which matches every line with text"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to custom config.json file"
    )

    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main entry point for the search CLI."""
    args = parse_args(argv)

    try:
        if args.config:
            config_path = Path(args.config)
            if not config_path.exists():
                print(f"Error: Config file not found: {config_path}")
                return 1
            config = reload_config(config_path)
        else:
            config = get_config()
    except ConfigurationError as e:
        print(f"Configuration error: {e.message}")
        return 1

    # stdout carries only the report
    setup_logging_from_config(stream=sys.stderr)
    logger = get_logger(__name__)

    if args.term == "" and not (args.allow_empty or config.search.allow_empty_term):
        print("Error: Empty search term (use --allow-empty to match every line)")
        return 1

    try:
        books = CorpusLoader().load(args.corpus)
        report = search(args.term, books)

        if args.output:
            write_report(report, args.output)

    except BookSearchError as e:
        logger.error(e.message)
        print(f"Error: {e.message}")
        return 1

    if args.json:
        print(report_to_json(report))
    else:
        print(format_report_table(report))

    return 0


if __name__ == "__main__":
    sys.exit(main())
