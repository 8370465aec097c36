"""Tests for common.articles module."""

import json

from common.articles import (
    Article,
    article_from_dict,
    placeholder_title,
    read_articles,
    write_articles,
)


class TestPlaceholderTitle:
    def test_pads_to_three_digits(self) -> None:
        assert placeholder_title(2) == "SCP-002"
        assert placeholder_title(49) == "SCP-049"

    def test_longer_numbers_unpadded(self) -> None:
        assert placeholder_title(1234) == "SCP-1234"


class TestArticleFromDict:
    def test_full_record(self) -> None:
        result = article_from_dict(
            {"number": 173, "title": "The Sculpture", "up": [1, 2], "down": [3], "tags": [4]}
        )
        assert result == Article(
            number=173,
            title="The Sculpture",
            up=frozenset({1, 2}),
            down=frozenset({3}),
            tags=frozenset({4}),
        )

    def test_missing_title_uses_placeholder(self) -> None:
        assert article_from_dict({"number": 5, "up": [], "down": []}).title == "SCP-005"
        assert article_from_dict({"number": 5, "title": "", "up": [], "down": []}).title == "SCP-005"

    def test_missing_tags_stay_none(self) -> None:
        assert article_from_dict({"number": 5, "title": "T", "up": [1], "down": []}).tags is None

    def test_empty_tags_kept_empty(self) -> None:
        assert article_from_dict({"number": 5, "title": "T", "tags": []}).tags == frozenset()


class TestArticleStore:
    def test_write_sorts_sets_and_omits_missing_tags(self, tmp_path) -> None:
        path = tmp_path / "data" / "articles.json"
        write_articles(path, [
            Article(number=2, title="A", up=frozenset({3, 1}), down=frozenset({2})),
            Article(number=3, title="B", tags=frozenset({7, 5})),
        ])
        records = json.loads(path.read_text())
        assert records == [
            {"number": 2, "title": "A", "up": [1, 3], "down": [2]},
            {"number": 3, "title": "B", "up": [], "down": [], "tags": [5, 7]},
        ]

    def test_read_keeps_file_order(self, tmp_path) -> None:
        path = tmp_path / "articles.json"
        path.write_text(json.dumps([
            {"number": 9, "title": "Nine", "up": [1], "down": []},
            {"number": 2, "title": "Two", "up": [], "down": [1]},
        ]))
        result = read_articles(path)
        assert [a.number for a in result] == [9, 2]
        assert result[1].down == frozenset({1})

    def test_round_trip(self, tmp_path) -> None:
        path = tmp_path / "articles.json"
        articles = [
            Article(number=2, title="A", up=frozenset({1}), down=frozenset({2}), tags=frozenset({3})),
            Article(number=4, title="B", up=frozenset({1, 5})),
        ]
        write_articles(path, articles)
        assert read_articles(path) == articles
