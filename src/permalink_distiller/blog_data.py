"""Blog facade tying the compilers, classifier and article index together."""

import logging
import re
from collections.abc import Callable, Iterable
from typing import Any

from schemas.blog_options import BlogOptions
from schemas.resource import Resource

from .article_index import ArticleIndex
from .classifier import ResourceClassifier
from .compilers import PermalinkCompiler, SourcePatternCompiler
from .normalizers import normalize_lang

logger = logging.getLogger(__name__)


class BlogData:
    """All the articles of one blog, with accessors by various dimensions.

    Both templates are compiled when the blog is created, so a malformed
    configuration fails at startup rather than on the first resource.

    Attributes:
        options: Validated blog options
        controller: Opaque back-reference stored on claimed resources
        path_matcher: Regex matching article source paths
        subdir_matcher: Regex matching files nested under an article, or None
        matcher_indexes: Field name to capture index in both matchers
        custom_permalink_components: Custom fields used by the permalink
    """

    def __init__(
        self,
        options: BlogOptions | dict | None = None,
        controller: Any = None,
        normalize_lang: Callable[[str | None], str | None] = normalize_lang,
    ):
        if not isinstance(options, BlogOptions):
            options = BlogOptions.model_validate(options or {})
        self.options = options
        self.controller = controller
        self._normalize_lang = normalize_lang

        self._pattern = SourcePatternCompiler().compile(options.sources)
        self._permalink = PermalinkCompiler().compile(options.permalink)
        self._classifier = ResourceClassifier(
            self._pattern,
            self._permalink,
            is_development=options.is_development,
            preserve_locale=options.preserve_locale,
            index_file=options.index_file,
            normalize_lang=normalize_lang,
            controller=controller,
        )
        logger.debug(
            f"Compiled blog sources {options.sources!r} to {self.path_matcher.pattern!r}"
        )

    def __repr__(self) -> str:
        return f"<BlogData: {[article.path for article in self.articles]!r}>"

    @property
    def path_matcher(self) -> re.Pattern:
        return self._pattern.primary_matcher

    @property
    def subdir_matcher(self) -> re.Pattern | None:
        return self._pattern.subdir_matcher

    @property
    def matcher_indexes(self) -> dict[str, int]:
        return dict(self._pattern.field_index)

    @property
    def custom_permalink_components(self) -> list[str]:
        return list(self._permalink.custom_components)

    @property
    def index(self) -> ArticleIndex:
        return self._classifier.index

    def manipulate_resource_list(self, resources: Iterable[Resource]) -> list[Resource]:
        """Classify the site's resources and rewrite article destinations.

        Args:
            resources: The complete resource list of the site

        Returns:
            The resources to build, in their original order
        """
        return self._classifier.classify(resources)

    @property
    def articles(self) -> list[Resource]:
        """All articles, newest first."""
        return self.index.articles()

    def local_articles(self, lang: str | None = None) -> list[Resource]:
        """Articles in one language, newest first.

        Args:
            lang: Language to match; defaults to options.default_locale

        Raises:
            ValueError: If no language is given and no default is configured
        """
        lang = lang or self.options.default_locale
        if lang is None:
            raise ValueError("No language given and no default_locale configured")
        if not self.options.preserve_locale:
            lang = self._normalize_lang(lang)
        return self.index.articles_for_language(lang)

    @property
    def tags(self) -> dict[str, list[Resource]]:
        """Map each tag to its articles, newest first."""
        return self.index.tags()

    def article(self, path: str) -> Resource | None:
        """The article at the given source path, or None if there isn't one."""
        return self.index.by_path(str(path))
