"""Queryable view over the articles accepted by a classification pass."""

from collections.abc import Iterable, Iterator
from datetime import datetime, timezone

from schemas.resource import Resource


def _sort_key(date: datetime) -> datetime:
    # Naive dates are taken as UTC so they order against aware ones.
    if date.tzinfo is None:
        return date.replace(tzinfo=timezone.utc)
    return date


class ArticleIndex:
    """Ordering, filtering and grouping queries over a set of articles.

    The index is rebuilt on every classification pass and never modified
    afterwards. Ordering is by date, newest first; articles sharing a date
    keep the order in which they were classified.
    """

    def __init__(self, articles: Iterable[Resource] = ()):
        self._articles = list(articles)
        self._by_path = {article.path: article for article in self._articles}
        self._ordered = sorted(
            self._articles, key=lambda article: _sort_key(article.article.date), reverse=True
        )

    def __repr__(self) -> str:
        return f"ArticleIndex({[article.path for article in self._ordered]!r})"

    def __len__(self) -> int:
        return len(self._articles)

    def __iter__(self) -> Iterator[Resource]:
        return iter(self._ordered)

    def __contains__(self, path: object) -> bool:
        return path in self._by_path

    def articles(self) -> list[Resource]:
        """All articles, newest first."""
        return list(self._ordered)

    def articles_for_language(self, lang: str | None) -> list[Resource]:
        """Articles whose language equals lang, newest first."""
        return [article for article in self._ordered if article.article.lang == lang]

    def tags(self) -> dict[str, list[Resource]]:
        """Map each tag to the articles carrying it, newest first."""
        tags: dict[str, list[Resource]] = {}
        for article in self._ordered:
            for tag in article.article.tags:
                tags.setdefault(tag, []).append(article)
        return tags

    def by_path(self, path: str) -> Resource | None:
        """The article with the given source path, or None."""
        return self._by_path.get(path)
