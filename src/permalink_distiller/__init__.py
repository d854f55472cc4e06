"""Permalink Distiller: blog article recognition and permalink generation."""

from .article_index import ArticleIndex
from .blog_data import BlogData
from .classifier import ResourceClassifier
from .exceptions import ConfigurationError, ConsistencyError, DistillerError

__all__ = [
    "ArticleIndex",
    "BlogData",
    "ConfigurationError",
    "ConsistencyError",
    "DistillerError",
    "ResourceClassifier",
]
