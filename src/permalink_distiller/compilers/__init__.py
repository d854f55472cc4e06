"""Compilers for source and permalink templates."""

from .compiler import Compiler, Segment
from .permalink_compiler import (
    CompiledPermalink,
    PermalinkCompiler,
    custom_permalink_components,
    resolve_permalink,
)
from .source_pattern_compiler import CompiledSourcePattern, SourcePatternCompiler

__all__ = [
    "Compiler",
    "Segment",
    "CompiledPermalink",
    "CompiledSourcePattern",
    "PermalinkCompiler",
    "SourcePatternCompiler",
    "custom_permalink_components",
    "resolve_permalink",
]
