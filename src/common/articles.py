"""Article records and their on-disk store."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from common.local_io import read_json, write_json
from common.serialization import serialize_dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Article:
    """A wiki article with the interned ids of its voters and, optionally, its tags."""
    number: int
    title: str
    up: frozenset[int] = field(default_factory=frozenset)
    down: frozenset[int] = field(default_factory=frozenset)
    tags: Optional[frozenset[int]] = None


def placeholder_title(number: int) -> str:
    """Title used when the series index has no entry for an article."""
    return f"SCP-{number:03d}"


def article_from_dict(raw: dict[str, Any]) -> Article:
    """Build an Article from a persisted record."""
    number = int(raw["number"])
    title = raw.get("title") or placeholder_title(number)
    tags = raw.get("tags")
    return Article(
        number=number,
        title=title,
        up=frozenset(int(v) for v in raw.get("up", [])),
        down=frozenset(int(v) for v in raw.get("down", [])),
        tags=frozenset(int(v) for v in tags) if tags is not None else None,
    )


def read_articles(path: str | Path) -> list[Article]:
    """Load the whole article corpus, keeping file order."""
    records = read_json(path)
    articles = [article_from_dict(record) for record in records]
    logger.info("Loaded %d articles from %s", len(articles), path)
    return articles


def write_articles(path: str | Path, articles: list[Article]) -> Path:
    """Persist articles as a JSON array; tags are omitted when not collected."""
    records = [serialize_dataclass(article, drop_none=True) for article in articles]
    filepath = write_json(path, records)
    logger.info("Saved %d articles to %s", len(records), filepath)
    return filepath
