"""Tests for common.serialization module."""

from dataclasses import dataclass
from typing import Optional

from common.serialization import serialize_dataclass


@dataclass
class SampleData:
    name: str
    value: int


@dataclass
class SampleWithSets:
    name: str
    ids: frozenset
    nested: dict


@dataclass
class SampleWithOptional:
    name: str
    tags: Optional[frozenset] = None


class TestSerializeDataclass:
    def test_basic_dataclass_to_dict(self) -> None:
        obj = SampleData(name="test", value=42)
        result = serialize_dataclass(obj)
        assert result == {"name": "test", "value": 42}

    def test_sets_become_sorted_lists(self) -> None:
        obj = SampleWithSets(name="test", ids=frozenset({5, 1, 3}), nested={"more": {9, 2}})
        result = serialize_dataclass(obj)
        assert result["ids"] == [1, 3, 5]
        assert result["nested"]["more"] == [2, 9]

    def test_keeps_none_by_default(self) -> None:
        result = serialize_dataclass(SampleWithOptional(name="test"))
        assert result == {"name": "test", "tags": None}

    def test_drop_none(self) -> None:
        result = serialize_dataclass(SampleWithOptional(name="test"), drop_none=True)
        assert result == {"name": "test"}
