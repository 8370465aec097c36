"""Scrape titles and votes for a range of articles."""

import logging

import requests

from common.articles import Article, placeholder_title
from common.config import Config
from scrape_votes.fetch_pages import build_session, fetch_article, fetch_titles
from scrape_votes.interner import Interner
from scrape_votes.parse_pages import PageParseError

logger = logging.getLogger(__name__)


def scrape_articles(config: Config, session: requests.Session | None = None) -> list[Article]:
    """Fetch every article in the configured number range.

    Articles that fail to load are logged and skipped. Titles missing from
    the series indexes fall back to the catalogue placeholder.
    """
    wiki = config.wiki
    scrape = config.scrape
    if session is None:
        session = build_session(wiki)

    titles = fetch_titles(session, wiki)

    voters = Interner()
    tags = Interner() if scrape.collect_tags else None

    articles = []
    for number in range(scrape.first_article, scrape.max_article):
        title = titles.get(number) or placeholder_title(number)
        try:
            article = fetch_article(session, number, title, voters, tags, wiki, scrape)
        except (requests.RequestException, PageParseError) as e:
            logger.warning("Skipping %s: %s", placeholder_title(number), e)
            continue

        logger.info("Loaded: %s", placeholder_title(number))
        articles.append(article)

    logger.info(
        "All articles loaded: %d articles, %d voters%s",
        len(articles),
        len(voters),
        f", {len(tags)} tags" if tags is not None else "",
    )
    return articles
