"""Schema definitions for Permalink Distiller."""

from .blog_options import BlogOptions
from .resource import ArticleFields, Resource

__all__ = [
    "ArticleFields",
    "BlogOptions",
    "Resource",
]
