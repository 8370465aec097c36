"""HTTP access to the wiki: series indexes, article pages and rating modules."""

from __future__ import annotations

import logging

import requests

from common.articles import Article
from common.config import ScrapeConfig, WikiConfig
from scrape_votes.interner import Interner
from scrape_votes.parse_pages import (
    PageParseError,
    parse_page_id,
    parse_tags,
    parse_titles,
    parse_votes,
)

logger = logging.getLogger(__name__)

WHO_RATED_MODULE = "pagerate/WhoRatedPageModule"

# Wikidot only checks that the cookie and form field agree.
WIKIDOT_TOKEN = "scpsuggest"


def build_session(wiki: WikiConfig) -> requests.Session:
    """Create a session with the headers and token cookie the wiki expects."""
    session = requests.Session()
    session.headers.update({"User-Agent": wiki.user_agent})
    session.cookies.set("wikidot_token7", WIKIDOT_TOKEN)
    return session


def series_urls(wiki: WikiConfig) -> list[str]:
    """Series index pages: /scp-series, then /scp-series-2 onwards."""
    urls = [f"{wiki.base_url}/scp-series"]
    urls.extend(f"{wiki.base_url}/scp-series-{i}" for i in range(2, wiki.series_pages + 1))
    return urls


def fetch_titles(session: requests.Session, wiki: WikiConfig) -> dict[int, str]:
    """Fetch all series index pages and merge their article titles."""
    titles: dict[int, str] = {}
    for url in series_urls(wiki):
        try:
            response = session.get(url, timeout=wiki.request_timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning("Failed to fetch series index %s: %s", url, e)
            continue

        page_titles = parse_titles(response.text)
        logger.info("Found %d titles on %s", len(page_titles), url)
        titles.update(page_titles)

    logger.info("Total titles collected: %d", len(titles))
    return titles


def request_module(
    session: requests.Session,
    wiki: WikiConfig,
    module_name: str,
    page_id: int,
) -> str:
    """POST to Wikidot's AJAX module connector and return the module HTML body."""
    response = session.post(
        f"{wiki.base_url}/ajax-module-connector.php",
        data={
            "moduleName": module_name,
            "pageId": str(page_id),
            "wikidot_token7": WIKIDOT_TOKEN,
        },
        timeout=wiki.request_timeout,
    )
    response.raise_for_status()

    try:
        payload = response.json()
    except ValueError as exc:
        raise PageParseError(f"{module_name} returned non-JSON response") from exc

    if payload.get("status") != "ok":
        raise PageParseError(
            f"{module_name} failed for page {page_id}: {payload.get('message', payload.get('status'))}"
        )
    return payload.get("body", "")


def fetch_article(
    session: requests.Session,
    number: int,
    title: str,
    voters: Interner,
    tags: Interner | None,
    wiki: WikiConfig,
    scrape: ScrapeConfig,
) -> Article:
    """Fetch an article page and its ratings and build an Article.

    Tags are parsed only when a tag interner is given.

    Raises:
        requests.RequestException: On HTTP failures.
        PageParseError: When the page or module response is malformed.
    """
    response = session.get(f"{wiki.base_url}/SCP-{number:03d}", timeout=wiki.request_timeout)
    response.raise_for_status()
    page_html = response.text

    page_id = parse_page_id(page_html)
    body = request_module(session, wiki, WHO_RATED_MODULE, page_id)
    up, down = parse_votes(body, voters)

    article_tags = None
    if tags is not None:
        article_tags = parse_tags(page_html, tags, scrape.tag_denylist)

    logger.debug(
        "SCP-%03d: page %d, %d up, %d down", number, page_id, len(up), len(down)
    )
    return Article(number=number, title=title, up=up, down=down, tags=article_tags)
