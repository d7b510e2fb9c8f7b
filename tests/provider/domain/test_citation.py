"""Tests for Citation and the add_if_new dedup helper."""

import pytest
from pydantic import ValidationError

from search_compare.provider.domain.citation import Citation, add_if_new


def _make_citation(url: str, title: str = "") -> Citation:
    return Citation(url=url, title=title)


class TestAddIfNew:
    """add_if_new keeps URLs unique and non-empty, first occurrence wins."""

    def test_appends_new_url(self) -> None:
        collection: list[Citation] = []
        seen: set[str] = set()

        add_if_new(collection, seen, _make_citation("https://a.example"))

        assert [c.url for c in collection] == ["https://a.example"]
        assert seen == {"https://a.example"}

    def test_duplicate_url_is_ignored(self) -> None:
        collection: list[Citation] = []
        seen: set[str] = set()

        add_if_new(collection, seen, _make_citation("https://a.example", title="first"))
        add_if_new(collection, seen, _make_citation("https://a.example", title="second"))

        assert len(collection) == 1
        assert collection[0].title == "first"

    def test_empty_url_is_ignored(self) -> None:
        collection: list[Citation] = []
        seen: set[str] = set()

        add_if_new(collection, seen, _make_citation(""))

        assert collection == []
        assert seen == set()

    def test_any_sequence_of_calls_leaves_no_duplicates(self) -> None:
        urls = ["u1", "", "u2", "u1", "u3", "u2", "", "u1"]
        collection: list[Citation] = []
        seen: set[str] = set()

        for url in urls:
            add_if_new(collection, seen, _make_citation(url))

        collected = [c.url for c in collection]
        assert collected == ["u1", "u2", "u3"]
        assert len(set(collected)) == len(collected)
        assert seen == set(collected)


class TestCitationModel:
    def test_title_and_domain_default_to_empty(self) -> None:
        citation = Citation(url="https://a.example")

        assert citation.title == ""
        assert citation.domain == ""

    def test_is_frozen(self) -> None:
        citation = Citation(url="https://a.example")

        with pytest.raises(ValidationError):
            citation.url = "https://b.example"  # type: ignore[misc]
