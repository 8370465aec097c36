"""Data models for suggest_articles pipeline stage."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Numeric:
    """A defined similarity score."""
    value: float


@dataclass(frozen=True)
class Incomparable:
    """Score against an article with no votes (or tags); ranks after every Numeric."""


INCOMPARABLE = Incomparable()

Score = Union[Numeric, Incomparable]


def sort_key(score: Score) -> tuple[int, float]:
    """Ascending sort key putting the highest Numeric first and Incomparable last."""
    if isinstance(score, Numeric):
        return (0, -score.value)
    return (1, 0.0)


@dataclass(frozen=True)
class Suggestion:
    """One related article for a source article."""
    number: int
    score: Score


@dataclass
class SuggestionList:
    """Persisted suggestions for one source article."""
    i: int
    s: str
    xs: list[dict[str, Optional[Union[int, float]]]]
