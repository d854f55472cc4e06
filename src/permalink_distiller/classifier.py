"""Resource classifier.

Walks a site's full resource list once and decides, for every resource,
whether it is a blog article, a companion file nested under an article's
directory, or something the blog does not own. Articles and companions get
their destination paths rewritten; drafts are dropped outside development.
"""

import logging
import re
from collections.abc import Callable, Iterable
from datetime import datetime
from typing import Any

from schemas.resource import ArticleFields, Resource

from .article_index import ArticleIndex
from .compilers import CompiledPermalink, CompiledSourcePattern
from .exceptions import ConfigurationError, ConsistencyError
from .normalizers import normalize_lang, normalize_path, slugify

logger = logging.getLogger(__name__)


class ResourceClassifier:
    """Classify resources against a compiled source pattern.

    Attributes:
        pattern: Compiled source template
        permalink: Compiled permalink template
        is_development: Whether unpublished articles are kept
        preserve_locale: Skip language normalization when set
        index_file: Index file name stripped from owner permalinks
        normalize_lang: Language normalization policy; must be idempotent
        controller: Opaque back-reference stored on claimed resources
        index: Articles accepted by the last pass
    """

    def __init__(
        self,
        pattern: CompiledSourcePattern,
        permalink: CompiledPermalink,
        is_development: bool = True,
        preserve_locale: bool = False,
        index_file: str = "index.html",
        normalize_lang: Callable[[str | None], str | None] = normalize_lang,
        controller: Any = None,
    ):
        self.pattern = pattern
        self.permalink = permalink
        self.is_development = is_development
        self.preserve_locale = preserve_locale
        self.index_file = index_file
        self.normalize_lang = normalize_lang
        self.controller = controller
        self.index = ArticleIndex()

        self._owner_suffix = re.compile(
            rf"(/{re.escape(index_file)}$)|(\.[^./]+$)|(/$)"
        )

    def classify(self, resources: Iterable[Resource]) -> list[Resource]:
        """Classify every resource and rewrite article destinations.

        Args:
            resources: The complete resource list of the site

        Returns:
            The resources to build, in their original order; drafts and
            files belonging to drafts are left out outside development

        Raises:
            ConsistencyError: If a nested file has no owning article
            ConfigurationError: If an article cannot produce its permalink
        """
        # Owner lookups need the whole universe, not just what came before.
        resources = list(resources)
        by_path = {resource.path: resource for resource in resources}

        articles = []
        used = []
        skipped = 0

        for resource in resources:
            match = self.pattern.primary_matcher.match(resource.path)
            subdir = None if match else self._subdir_match(resource)
            if match:
                self._promote(resource, match)

                if not self._is_visible(resource):
                    logger.debug(f"Skipping unpublished article {resource.path}")
                    skipped += 1
                    continue

                resource.destination_path = normalize_path(
                    self.permalink.resolve(resource.article)
                )
                articles.append(resource)

            elif subdir:
                captures = self.pattern.captures(subdir)
                owner = self._find_owner(resource, captures, by_path)

                if not self._is_visible(owner):
                    logger.debug(
                        f"Skipping {resource.path}: article {owner.path} is unpublished"
                    )
                    skipped += 1
                    continue

                resource.kind = "companion"
                resource.owner_path = owner.path
                resource.controller = self.controller
                resource.destination_path = normalize_path(
                    self._companion_permalink(owner, captures["path"])
                )
                logger.debug(
                    f"Companion {resource.path} of {owner.path} -> {resource.destination_path}"
                )

            used.append(resource)

        self.index = ArticleIndex(articles)
        logger.info(
            f"Classified {len(resources)} resources: {len(articles)} articles, {skipped} skipped"
        )
        return used

    def _subdir_match(self, resource: Resource) -> re.Match | None:
        if self.pattern.subdir_matcher is None:
            return None
        return self.pattern.subdir_matcher.match(resource.path)

    def _companion_permalink(self, owner: Resource, tail: str) -> str:
        """Owner permalink with its index file, extension or trailing slash
        replaced by the companion's nested path."""
        permalink = self.permalink.resolve(owner.article)
        if self._owner_suffix.search(permalink) is None:
            return permalink + tail
        return self._owner_suffix.sub(lambda _: tail, permalink, count=1)

    def _is_visible(self, article: Resource) -> bool:
        return self.is_development or article.published

    def _find_owner(
        self, resource: Resource, captures: dict[str, str], by_path: dict[str, Resource]
    ) -> Resource:
        owner_path = self.pattern.source_path(captures)
        owner = by_path.get(owner_path)
        if owner is None:
            raise ConsistencyError(
                f"Article for {resource.path} not found at {owner_path}",
                resource_path=resource.path,
                owner_path=owner_path,
            )

        match = self.pattern.primary_matcher.match(owner.path)
        if match is None:
            raise ConsistencyError(
                f"Owner {owner_path} of {resource.path} is not an article source",
                resource_path=resource.path,
                owner_path=owner_path,
            )
        self._promote(owner, match)
        return owner

    def _promote(self, resource: Resource, match: re.Match) -> None:
        """Attach article fields to a resource matching the source pattern."""
        captures = self.pattern.captures(match)

        lang = captures.get("lang") or resource.lang
        if not self.preserve_locale:
            lang = self.normalize_lang(lang)

        resource.kind = "article"
        resource.controller = self.controller
        resource.article = ArticleFields(
            lang=lang,
            date=self._article_date(resource, captures),
            slug=resource.slug or captures.get("title") or slugify(resource.data.get("title")),
            tags=resource.tags,
            data=resource.data,
            captures=captures,
        )

    def _article_date(self, resource: Resource, captures: dict[str, str]) -> datetime:
        if resource.date is not None:
            return resource.date
        if "year" not in captures:
            raise ConfigurationError(
                f"Article {resource.path} has no date in its path or metadata",
                template=self.pattern.template,
                field="date",
            )
        try:
            return datetime(
                int(captures["year"]),
                int(captures.get("month", 1)),
                int(captures.get("day", 1)),
            )
        except ValueError as e:
            raise ConfigurationError(
                f"Article {resource.path} has an invalid date in its path: {e}",
                template=self.pattern.template,
                field="date",
            ) from e
