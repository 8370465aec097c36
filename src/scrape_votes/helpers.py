"""Helper functions for scrape_votes CLI."""

from __future__ import annotations

import argparse

from common.cli_helpers import parse_positive_int


def parse_scrape_votes_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for scrape_votes."""

    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--config",
        default=None,
        help="Config name under configs/ (default: $CONFIG_ENV or prod)",
    )

    # Range options
    parser.add_argument(
        "--first",
        type=lambda v: parse_positive_int(v, "first"),
        default=None,
        help="First article number to fetch",
    )
    parser.add_argument(
        "--max",
        type=lambda v: parse_positive_int(v, "max"),
        default=None,
        help="Stop before this article number",
    )
    parser.add_argument(
        "--tags",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Also collect article tags",
    )

    # Output options
    parser.add_argument("--output", default=None, help="Articles JSON file to write")

    return parser.parse_args(argv)
