"""Tests for scrape_votes.scrape_votes module."""

from unittest.mock import Mock, patch

import requests

from common.articles import Article
from common.config import Config, ScrapeConfig
from scrape_votes.parse_pages import PageParseError
from scrape_votes.scrape_votes import scrape_articles


def _config(**scrape) -> Config:
    return Config(scrape=ScrapeConfig(**scrape))


def _fake_fetch(session, number, title, voters, tags, wiki, scrape) -> Article:
    return Article(
        number=number,
        title=title,
        up=frozenset({voters.get(f"user{number}")}),
        tags=frozenset() if tags is not None else None,
    )


@patch("scrape_votes.scrape_votes.fetch_article")
@patch("scrape_votes.scrape_votes.fetch_titles")
class TestScrapeArticles:
    def test_fetches_range_with_titles(self, mock_titles, mock_fetch) -> None:
        mock_titles.return_value = {2: "The Living Room"}
        mock_fetch.side_effect = _fake_fetch

        result = scrape_articles(_config(first_article=2, max_article=5), session=Mock())

        assert [a.number for a in result] == [2, 3, 4]
        assert result[0].title == "The Living Room"
        assert result[1].title == "SCP-003"

    def test_continues_on_article_error(self, mock_titles, mock_fetch) -> None:
        mock_titles.return_value = {}
        mock_fetch.side_effect = [
            requests.HTTPError("404"),
            PageParseError("pageId not found"),
            Article(number=4, title="SCP-004", up=frozenset({0})),
        ]

        result = scrape_articles(_config(first_article=2, max_article=5), session=Mock())

        assert [a.number for a in result] == [4]

    def test_shares_voter_interner(self, mock_titles, mock_fetch) -> None:
        mock_titles.return_value = {}
        mock_fetch.side_effect = _fake_fetch

        scrape_articles(_config(first_article=2, max_article=4), session=Mock())

        first_voters = mock_fetch.call_args_list[0].args[3]
        second_voters = mock_fetch.call_args_list[1].args[3]
        assert first_voters is second_voters
        assert first_voters.names() == {"user2": 0, "user3": 1}

    def test_tag_interner_only_when_enabled(self, mock_titles, mock_fetch) -> None:
        mock_titles.return_value = {}
        mock_fetch.side_effect = _fake_fetch

        without_tags = scrape_articles(_config(first_article=2, max_article=3), session=Mock())
        with_tags = scrape_articles(
            _config(first_article=2, max_article=3, collect_tags=True), session=Mock()
        )

        assert without_tags[0].tags is None
        assert with_tags[0].tags == frozenset()

    @patch("scrape_votes.scrape_votes.build_session")
    def test_builds_session_when_missing(self, mock_build, mock_titles, mock_fetch) -> None:
        mock_titles.return_value = {}
        mock_fetch.side_effect = _fake_fetch
        config = _config(first_article=2, max_article=3)

        scrape_articles(config)

        mock_build.assert_called_once_with(config.wiki)
        mock_titles.assert_called_once_with(mock_build.return_value, config.wiki)
