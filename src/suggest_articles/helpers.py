"""Helper functions for suggest_articles CLI."""

from __future__ import annotations

import argparse

from common.cli_helpers import parse_positive_int


def parse_suggest_articles_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for suggest_articles.

    Options left unset fall back to the suggest section of the loaded config.
    """

    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--config",
        default=None,
        help="Config name under configs/ (default: $CONFIG_ENV or prod)",
    )

    # Input/output options
    parser.add_argument("--input", default=None, help="Articles JSON file to read")
    parser.add_argument("--output", default=None, help="Suggestions JSON file to write")

    # Ranking options
    parser.add_argument(
        "--attribute",
        choices=["votes", "tags"],
        default=None,
        help="Score articles by shared votes or shared tags",
    )
    parser.add_argument(
        "--limit",
        type=lambda v: parse_positive_int(v, "limit"),
        default=None,
        help="Maximum suggestions per article",
    )
    parser.add_argument(
        "--scale",
        type=lambda v: parse_positive_int(v, "scale"),
        default=None,
        help="Store scores as int(score * SCALE) instead of floats",
    )
    parser.add_argument(
        "--exclude-incomparable",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Drop articles without votes (or tags) from suggestion lists",
    )

    return parser.parse_args(argv)
