"""Permalink compiler.

Compiles a permalink template such as ":year/:month/:title/" into a
sequence of literal and field segments, evaluated per article by plain
concatenation.
"""

import re
from dataclasses import dataclass

from permalink_distiller.exceptions import ConfigurationError
from permalink_distiller.normalizers import slugify
from schemas.resource import ArticleFields

from .compiler import FIELD_NAMES, Compiler, Segment, tokenize

PERMALINK_TOKEN = re.compile(r":([A-Za-z0-9]+)")

# Fields substituted at every occurrence; :title and custom fields only
# at their first.
REPEATABLE_FIELDS = ("lang", "year", "month", "day")


@dataclass(frozen=True)
class CompiledPermalink:
    """A compiled permalink template.

    Attributes:
        template: The original template
        segments: Literal and field segments in template order
        custom_components: Custom field names, in order of first occurrence
    """

    template: str
    segments: tuple[Segment, ...]
    custom_components: tuple[str, ...]

    def resolve(self, fields: ArticleFields) -> str:
        """Build the permalink for one article.

        Args:
            fields: The article's structured fields

        Returns:
            The permalink, not yet path-normalized

        Raises:
            ConfigurationError: If the article lacks a value the template needs
        """
        parts = []
        for segment in self.segments:
            if not segment.is_field:
                parts.append(segment.text)
            else:
                parts.append(self._value(segment.text, fields))
        return "".join(parts)

    def _value(self, name: str, fields: ArticleFields) -> str:
        if name == "lang":
            if not fields.lang:
                raise ConfigurationError(
                    f"Permalink {self.template!r} uses :lang but the article has no language",
                    template=self.template,
                    field=name,
                )
            return str(fields.lang)
        if name == "year":
            return f"{fields.date.year:04d}"
        if name == "month":
            return f"{fields.date.month:02d}"
        if name == "day":
            return f"{fields.date.day:02d}"
        if name == "title":
            return fields.slug

        if fields.data.get(name) is None:
            raise ConfigurationError(
                f"Permalink {self.template!r} uses :{name} but the article has no {name!r} metadata",
                template=self.template,
                field=name,
            )
        value = slugify(fields.data[name])
        if not value:
            raise ConfigurationError(
                f"Permalink {self.template!r} uses :{name} but the article's {name!r} metadata is empty once slugified",
                template=self.template,
                field=name,
            )
        return value


class PermalinkCompiler(Compiler):
    """Compile permalink templates."""

    def compile(self, template: str) -> CompiledPermalink:
        """Compile a permalink template.

        Any ":name" token is a field. The fixed fields are :lang, :year,
        :month, :day and :title; all other names are custom fields looked
        up in the article's metadata. A repeated :title or custom token is
        kept as literal text after its first occurrence.

        Args:
            template: Permalink template

        Returns:
            CompiledPermalink ready to resolve articles

        Raises:
            ConfigurationError: If the template is empty
        """
        if not template.strip():
            raise ConfigurationError("Permalink template is empty", template=template)

        segments = []
        seen = set()
        for segment in tokenize(template, PERMALINK_TOKEN):
            if segment.is_field and segment.text not in REPEATABLE_FIELDS:
                if segment.text in seen:
                    segment = Segment(f":{segment.text}")
                seen.add(segment.text)
            segments.append(segment)

        custom = [
            name
            for name in dict.fromkeys(PERMALINK_TOKEN.findall(template))
            if name not in FIELD_NAMES
        ]
        return CompiledPermalink(
            template=template,
            segments=tuple(segments),
            custom_components=tuple(custom),
        )


def custom_permalink_components(template: str) -> list[str]:
    """List the custom fields a permalink template references.

    Examples:
        >>> custom_permalink_components(":year/:category/:title/:category.html")
        ['category']
    """
    return list(PermalinkCompiler().compile(template).custom_components)


def resolve_permalink(template: str, fields: ArticleFields) -> str:
    """Compile and resolve a permalink template in one step."""
    return PermalinkCompiler().compile(template).resolve(fields)
