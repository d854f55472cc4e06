"""Tests for the article index."""

from datetime import datetime, timedelta, timezone

import pytest

from permalink_distiller import ArticleIndex
from schemas import ArticleFields, Resource


def make_article(path: str, date: datetime, lang: str = "en", tags=()) -> Resource:
    return Resource(
        path=path,
        kind="article",
        article=ArticleFields(date=date, slug=path, lang=lang, tags=list(tags)),
    )


@pytest.fixture
def index():
    return ArticleIndex(
        [
            make_article("old", datetime(2013, 1, 1), tags=["a"]),
            make_article("new", datetime(2015, 1, 1), lang="de", tags=["a", "b"]),
            make_article("tie-first", datetime(2014, 1, 1), tags=["b"]),
            make_article("tie-second", datetime(2014, 1, 1), tags=["a"]),
        ]
    )


class TestArticles:
    """Tests for recency ordering."""

    def test_newest_first(self, index):
        """Articles are ordered by date, newest first."""
        assert [a.path for a in index.articles()] == [
            "new",
            "tie-first",
            "tie-second",
            "old",
        ]

    def test_ties_keep_classification_order(self):
        """Articles sharing a date keep their original relative order."""
        date = datetime(2014, 1, 1)
        index = ArticleIndex([make_article(str(i), date) for i in range(5)])

        assert [a.path for a in index.articles()] == ["0", "1", "2", "3", "4"]

    def test_mixed_naive_and_aware_dates(self):
        """Naive dates are ordered as UTC against timezone-aware ones."""
        index = ArticleIndex(
            [
                make_article("naive", datetime(2014, 1, 1, 12)),
                make_article(
                    "aware", datetime(2014, 1, 1, 12, tzinfo=timezone(timedelta(hours=-5)))
                ),
            ]
        )

        assert [a.path for a in index.articles()] == ["aware", "naive"]

    def test_membership_preserved(self, index):
        """Sorting neither drops nor duplicates articles."""
        paths = [a.path for a in index.articles()]

        assert sorted(paths) == sorted(["old", "new", "tie-first", "tie-second"])

    def test_iteration_and_len(self, index):
        """Iterating the index yields articles newest first."""
        assert len(index) == 4
        assert [a.path for a in index] == [a.path for a in index.articles()]

    def test_empty(self):
        """An empty index answers every query with nothing."""
        index = ArticleIndex()

        assert index.articles() == []
        assert index.tags() == {}
        assert index.by_path("anything") is None


class TestLanguage:
    """Tests for language filtering."""

    def test_filters_by_language(self, index):
        """Only articles in the requested language are returned."""
        assert [a.path for a in index.articles_for_language("en")] == [
            "tie-first",
            "tie-second",
            "old",
        ]
        assert [a.path for a in index.articles_for_language("de")] == ["new"]

    def test_unknown_language(self, index):
        """A language without articles gives an empty list."""
        assert index.articles_for_language("fr") == []


class TestTags:
    """Tests for tag grouping."""

    def test_groups_by_tag(self, index):
        """Each tag maps to the articles carrying it, newest first."""
        tags = index.tags()

        assert [a.path for a in tags["a"]] == ["new", "tie-second", "old"]
        assert [a.path for a in tags["b"]] == ["new", "tie-first"]

    def test_tag_lists_follow_articles_order(self, index):
        """A tag's list is the articles() subset carrying it, in order."""
        tags = index.tags()

        for tag, articles in tags.items():
            expected = [a for a in index.articles() if tag in a.article.tags]
            assert articles == expected


class TestByPath:
    """Tests for lookup by source path."""

    def test_found(self, index):
        """An indexed article is returned by its source path."""
        assert index.by_path("old").path == "old"
        assert "old" in index

    def test_not_found(self, index):
        """Unknown paths return None."""
        assert index.by_path("missing") is None
        assert "missing" not in index
