"""Parsers for Wikidot series indexes, article pages and rating modules."""

from __future__ import annotations

import logging
import re
from typing import Iterable, Optional

from lxml import html as lxml_html

from scrape_votes.interner import Interner

logger = logging.getLogger(__name__)

PAGE_ID_PATTERN = re.compile(r"WIKIREQUEST\.info\.pageId\s*=\s*(\d+)\s*;")

SERIES_ITEMS_XPATH = "//div[contains(concat(' ', normalize-space(@class), ' '), ' series ')]//li"
PRINTUSER_XPATH = ".//span[contains(concat(' ', normalize-space(@class), ' '), ' printuser ')]"
PAGE_TAGS_XPATH = "//div[contains(concat(' ', normalize-space(@class), ' '), ' page-tags ')]//a"


class PageParseError(ValueError):
    """Raised when a fetched page does not have the expected shape."""


def parse_title(item) -> Optional[tuple[int, str]]:
    """Parse one series index <li> into (number, title).

    Returns None for entries that do not link to a numbered article
    (joke articles, explained pages, anything off-catalogue).
    """
    links = item.findall(".//a")
    if not links:
        return None
    href = links[0].get("href") or ""
    if not href.lower().startswith("/scp-"):
        return None
    try:
        number = int(href[5:])
    except ValueError:
        return None

    text = " ".join(item.text_content().split())
    _, sep, after = text.partition("- ")
    title = after.strip() if sep else text
    return number, title


def parse_titles(page_html: str) -> dict[int, str]:
    """Parse every numbered entry of a series index page."""
    tree = lxml_html.fromstring(page_html)
    titles = {}
    for item in tree.xpath(SERIES_ITEMS_XPATH):
        parsed = parse_title(item)
        if parsed is not None:
            number, title = parsed
            titles[number] = title
    return titles


def parse_page_id(page_html: str) -> int:
    """Extract the Wikidot page id embedded in an article page's scripts."""
    match = PAGE_ID_PATTERN.search(page_html)
    if match is None:
        raise PageParseError("pageId not found in page")
    return int(match.group(1))


def _vote_sign(printuser) -> str:
    """Collect the text between a printuser span and the next <br>."""
    parts = [printuser.tail or ""]
    for sibling in printuser.itersiblings():
        if sibling.tag == "br":
            break
        parts.append(sibling.text_content())
        parts.append(sibling.tail or "")
    return "".join(parts)


def _voter_name(printuser) -> Optional[str]:
    """Name of the voter in a printuser span.

    Deleted accounts have no profile link and all read "(account deleted)",
    so they are keyed on their user id instead.
    """
    links = printuser.findall(".//a")
    if links:
        return links[-1].text_content().strip() or None
    user_id = printuser.get("data-id")
    if user_id:
        return f"deleted:{user_id}"
    return None


def parse_votes(body: str, voters: Interner) -> tuple[frozenset[int], frozenset[int]]:
    """Parse a WhoRatedPageModule body into (upvoter ids, downvoter ids).

    Rows without a user name or without a +/- sign are skipped, as are
    deleted accounts with no user id.
    """
    if not body or not body.strip():
        return frozenset(), frozenset()

    root = lxml_html.fragment_fromstring(body, create_parent="div")
    up: set[int] = set()
    down: set[int] = set()
    for printuser in root.xpath(PRINTUSER_XPATH):
        name = _voter_name(printuser)
        if not name:
            continue
        sign = _vote_sign(printuser)
        if "+" in sign:
            up.add(voters.get(name))
        elif "-" in sign:
            down.add(voters.get(name))
        else:
            logger.debug("No vote sign for %s", name)
    return frozenset(up), frozenset(down)


def parse_tags(page_html: str, tags: Interner, denylist: Iterable[str] = ()) -> frozenset[int]:
    """Parse an article page's tag links into tag ids, skipping denylisted tags."""
    tree = lxml_html.fromstring(page_html)
    denied = {tag.lower() for tag in denylist}
    ids = set()
    for link in tree.xpath(PAGE_TAGS_XPATH):
        name = link.text_content().strip().lower()
        if name and name not in denied:
            ids.add(tags.get(name))
    return frozenset(ids)
