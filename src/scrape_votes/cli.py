"""CLI for scraping article votes from the wiki."""

from __future__ import annotations

import logging
from dataclasses import replace

from dotenv import load_dotenv

from common.articles import write_articles
from common.cli_helpers import setup_logging
from common.config import get_config, load_config, set_config
from scrape_votes.helpers import parse_scrape_votes_args
from scrape_votes.scrape_votes import scrape_articles

load_dotenv()

setup_logging()
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    args = parse_scrape_votes_args(argv)

    if args.config is not None:
        set_config(load_config(args.config))
    config = get_config()

    scrape = config.scrape
    if args.first is not None:
        scrape = replace(scrape, first_article=args.first)
    if args.max is not None:
        scrape = replace(scrape, max_article=args.max)
    if args.tags is not None:
        scrape = replace(scrape, collect_tags=args.tags)
    if args.output is not None:
        scrape = replace(scrape, output_path=args.output)

    if scrape.max_article <= scrape.first_article:
        raise ValueError("max must be greater than first")

    logger.info(
        "Scraping articles %d to %d from %s",
        scrape.first_article,
        scrape.max_article - 1,
        config.wiki.base_url,
    )

    articles = scrape_articles(replace(config, scrape=scrape))
    if not articles:
        logger.warning("No articles scraped")
        return

    write_articles(scrape.output_path, articles)


if __name__ == "__main__":
    main()
