"""Base class for template compilers."""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

FIELD_NAMES = ("lang", "year", "month", "day", "title")


@dataclass(frozen=True)
class Segment:
    """One piece of a compiled template.

    Attributes:
        text: Literal text, or the field name when is_field is set
        is_field: True for a placeholder, False for literal text
    """

    text: str
    is_field: bool = False


def tokenize(template: str, token_pattern: re.Pattern) -> list[Segment]:
    """Split a template into literal and field segments.

    Args:
        template: Template string
        token_pattern: Pattern whose first group is a field name

    Returns:
        Segments in template order; empty literals are dropped

    Examples:
        >>> tokenize(":year/:title.html", re.compile(r":(year|title)"))
        [Segment(text='year', is_field=True), Segment(text='/', is_field=False), Segment(text='title', is_field=True), Segment(text='.html', is_field=False)]
    """
    segments = []
    position = 0
    for match in token_pattern.finditer(template):
        if match.start() > position:
            segments.append(Segment(template[position : match.start()]))
        segments.append(Segment(match.group(1), is_field=True))
        position = match.end()
    if position < len(template):
        segments.append(Segment(template[position:]))
    return segments


class Compiler(ABC):
    """Abstract base class for template compilers.

    Compilers turn a user-supplied template string into an immutable
    compiled form once per configuration.
    """

    @abstractmethod
    def compile(self, template: str) -> Any:
        """Compile a template.

        Args:
            template: Template string using :field placeholders

        Returns:
            The compiled template
        """
        pass
