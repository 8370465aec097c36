"""Signed Jaccard-style similarity between articles and ranking against a corpus."""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Sequence

from common.articles import Article
from suggest_articles.models import INCOMPARABLE, Numeric, Score, sort_key

logger = logging.getLogger(__name__)

_EMPTY: frozenset[int] = frozenset()


class AttributeSource(str, Enum):
    """Which signed sets of an article the score is computed over."""

    VOTES = "votes"
    TAGS = "tags"

    def signed_sets(self, article: Article) -> tuple[frozenset[int], frozenset[int]]:
        """Return (positive, negative) sets for the article."""
        if self is AttributeSource.TAGS:
            return article.tags or _EMPTY, _EMPTY
        return article.up, article.down


def similarity(
    a: Article,
    b: Article,
    source: AttributeSource = AttributeSource.VOTES,
) -> Score:
    """Score two articles by the overlap of their signed sets.

    Shared positives count for the pair, and a member that is positive on one
    side and negative on the other counts against it (once, even if it shows
    up in both cross terms). The difference is normalised by the square roots
    of each article's distinct member count, so identical articles score 1.0
    and exact opposites score -1.0.

    Returns INCOMPARABLE when either article has no members at all.
    """
    a_pos, a_neg = source.signed_sets(a)
    b_pos, b_neg = source.signed_sets(b)

    a_size = len(a_pos | a_neg)
    b_size = len(b_pos | b_neg)
    if a_size == 0 or b_size == 0:
        return INCOMPARABLE

    pos = len(a_pos & b_pos)
    neg = len((a_pos & b_neg) | (a_neg & b_pos))
    return Numeric((pos - neg) / (math.sqrt(a_size) * math.sqrt(b_size)))


def rank(
    source: Article,
    corpus: Sequence[Article],
    attribute_source: AttributeSource = AttributeSource.VOTES,
) -> list[tuple[Article, Score]]:
    """Score source against every corpus article (itself included), best first.

    The sort is stable, so equal scores keep corpus order and repeated runs
    over the same corpus give the same ranking.
    """
    scored = [(article, similarity(source, article, attribute_source)) for article in corpus]
    scored.sort(key=lambda pair: sort_key(pair[1]))
    return scored
