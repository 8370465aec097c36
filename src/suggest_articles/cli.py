"""CLI for building related-article suggestions from scraped votes."""

from __future__ import annotations

import logging

from dotenv import load_dotenv

from common.articles import read_articles
from common.cli_helpers import setup_logging
from common.config import get_config, load_config, set_config
from common.local_io import write_json
from suggest_articles.helpers import parse_suggest_articles_args
from suggest_articles.similarity import AttributeSource
from suggest_articles.suggest_articles import build_suggestions, package_suggestions

load_dotenv()

setup_logging()
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    args = parse_suggest_articles_args(argv)

    if args.config is not None:
        set_config(load_config(args.config))
    settings = get_config().suggest

    input_path = args.input or settings.input_path
    output_path = args.output or settings.output_path
    attribute = AttributeSource(args.attribute or settings.attribute)
    limit = args.limit or settings.limit
    scale = args.scale or settings.score_scale
    exclude_incomparable = (
        settings.exclude_incomparable
        if args.exclude_incomparable is None
        else args.exclude_incomparable
    )

    articles = read_articles(input_path)
    if not articles:
        logger.warning("No articles found in %s", input_path)
        return

    if attribute is AttributeSource.TAGS and all(a.tags is None for a in articles):
        raise ValueError(f"{input_path} has no tags; re-scrape with --tags")

    suggestions = build_suggestions(
        articles,
        limit=limit,
        attribute_source=attribute,
        exclude_incomparable=exclude_incomparable,
    )
    records = package_suggestions(articles, suggestions, scale=scale)
    write_json(output_path, records)

    logger.info("Saved suggestions for %d articles to %s", len(records), output_path)


if __name__ == "__main__":
    main()
