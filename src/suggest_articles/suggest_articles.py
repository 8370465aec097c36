"""Build per-article suggestion lists from vote (or tag) similarity."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from common.articles import Article
from common.serialization import serialize_dataclass
from suggest_articles.models import Numeric, Score, Suggestion, SuggestionList
from suggest_articles.similarity import AttributeSource, rank

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 20


def suggest(
    article: Article,
    corpus: Sequence[Article],
    limit: int = MAX_SUGGESTIONS,
    attribute_source: AttributeSource = AttributeSource.VOTES,
    exclude_incomparable: bool = False,
) -> list[Suggestion]:
    """Return up to limit suggestions for one article, never including itself."""
    logger.debug("Suggesting: %s", article.title)

    suggestions = []
    for other, score in rank(article, corpus, attribute_source):
        if other.number == article.number:
            continue
        if exclude_incomparable and not isinstance(score, Numeric):
            continue
        suggestions.append(Suggestion(number=other.number, score=score))
        if len(suggestions) >= limit:
            break
    return suggestions


def build_suggestions(
    corpus: Sequence[Article],
    limit: int = MAX_SUGGESTIONS,
    attribute_source: AttributeSource = AttributeSource.VOTES,
    exclude_incomparable: bool = False,
) -> dict[int, list[Suggestion]]:
    """Compute the suggestion list for every article, keyed by article number.

    Each article is ranked independently against the whole, unmodified
    corpus. Keys follow corpus order.
    """
    if not corpus:
        logger.warning("No articles to suggest for")
        return {}

    logger.info(
        "Building suggestions for %d articles by %s (limit=%d)",
        len(corpus),
        attribute_source.value,
        limit,
    )

    results: dict[int, list[Suggestion]] = {}
    for article in corpus:
        results[article.number] = suggest(
            article,
            corpus,
            limit=limit,
            attribute_source=attribute_source,
            exclude_incomparable=exclude_incomparable,
        )

    logger.info("Built suggestions for %d articles", len(results))
    return results


def encode_score(score: Score, scale: Optional[int] = None) -> Optional[float | int]:
    """Encode a score for storage.

    Floats are written as-is unless scale is given, in which case the score is
    multiplied and truncated toward zero. Incomparable scores become None.
    """
    if not isinstance(score, Numeric):
        return None
    if scale is None:
        return score.value
    return int(score.value * scale)


def package_suggestions(
    corpus: Sequence[Article],
    suggestions: dict[int, list[Suggestion]],
    scale: Optional[int] = None,
) -> list[dict]:
    """Turn suggestion lists into persisted records, in corpus order."""
    records = []
    for article in corpus:
        entries = suggestions.get(article.number, [])
        record = SuggestionList(
            i=article.number,
            s=article.title,
            xs=[{"i": s.number, "p": encode_score(s.score, scale)} for s in entries],
        )
        records.append(serialize_dataclass(record))
    return records
