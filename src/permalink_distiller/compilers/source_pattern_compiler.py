"""Source pattern compiler.

Compiles a source path template such as ":lang/:year/:month/:day/:title.html"
into the regular expressions used to recognize article sources and the
files nested beneath them.
"""

import logging
import re
from dataclasses import dataclass

from permalink_distiller.exceptions import ConfigurationError

from .compiler import Compiler, Segment, tokenize

logger = logging.getLogger(__name__)

SOURCE_TOKEN = re.compile(r":(lang|year|month|day|title)")

FIELD_PATTERNS = {
    "lang": r"(\w{2}(?:-\w{2})?)",
    "year": r"(\d{4})",
    "month": r"(\d{2})",
    "day": r"(\d{2})",
    "title": r"([^/]+)",
}

TRAILING_EXTENSION = re.compile(r"\.[^.]+$")


@dataclass(frozen=True)
class CompiledSourcePattern:
    """A compiled source path template.

    Attributes:
        template: The template with any leading slash removed
        segments: Literal and field segments in template order
        primary_matcher: Matches article source paths, anchored at the start
        subdir_matcher: Matches files nested under an article's directory,
            or None when the template has no trailing extension
        field_index: Field name to zero-based capture group index; "path"
            is the group holding the nested subpath in subdir_matcher
    """

    template: str
    segments: tuple[Segment, ...]
    primary_matcher: re.Pattern
    subdir_matcher: re.Pattern | None
    field_index: dict[str, int]

    def captures(self, match: re.Match) -> dict[str, str]:
        """Map a primary or subdir match to its captured strings by field name."""
        groups = match.groups()
        return {
            name: groups[index]
            for name, index in self.field_index.items()
            if index < len(groups)
        }

    def source_path(self, captures: dict[str, str]) -> str:
        """Rebuild an article source path from captured field values.

        This is the inverse of matching: each field segment is replaced by
        its captured string, literals are kept as written.
        """
        return "".join(
            captures[segment.text] if segment.is_field else segment.text
            for segment in self.segments
        )


class SourcePatternCompiler(Compiler):
    """Compile source path templates into matchers.

    Each placeholder may appear at most once; a repeated placeholder would
    leave its capture index ambiguous.
    """

    def compile(self, template: str) -> CompiledSourcePattern:
        """Compile a source path template.

        Args:
            template: Source template using :lang, :year, :month, :day and :title

        Returns:
            CompiledSourcePattern with both matchers and the field index

        Raises:
            ConfigurationError: If the template is empty or repeats a placeholder
        """
        template = re.sub(r"^/", "", template)
        if not template:
            raise ConfigurationError("Source template is empty", template=template)

        segments = tuple(tokenize(template, SOURCE_TOKEN))

        field_index: dict[str, int] = {}
        for segment in segments:
            if not segment.is_field:
                continue
            if segment.text in field_index:
                raise ConfigurationError(
                    f"Placeholder :{segment.text} appears more than once in source template {template!r}",
                    template=template,
                    field=segment.text,
                )
            field_index[segment.text] = len(field_index)
        # The nested subpath always comes last.
        field_index["path"] = len(field_index)

        pattern = self._build_pattern(segments)
        subdir_matcher = None
        if segments and not segments[-1].is_field:
            literal = segments[-1].text
            extension = TRAILING_EXTENSION.search(literal)
            if extension:
                stem = self._build_pattern(segments[:-1]) + re.escape(literal[: extension.start()])
                subdir_matcher = re.compile(f"^{stem}(/.*)$")

        if subdir_matcher is None:
            logger.debug(f"Source template {template!r} has no extension; companions disabled")

        return CompiledSourcePattern(
            template=template,
            segments=segments,
            primary_matcher=re.compile(f"^{pattern}"),
            subdir_matcher=subdir_matcher,
            field_index=field_index,
        )

    def _build_pattern(self, segments) -> str:
        return "".join(
            FIELD_PATTERNS[segment.text] if segment.is_field else re.escape(segment.text)
            for segment in segments
        )

