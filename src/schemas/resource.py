"""Site resource schemas.

A Resource is one entry of the host's sitemap: a source path, the output
path it will be written to, and the metadata the host's loader parsed for
it. Classification tags each resource with a kind:

    plain      untouched by the blog, passed through unchanged
    article    matched the source pattern; carries an ArticleFields payload
    companion  nested under an article's directory (images, attachments);
               its destination follows the owning article
"""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator


class ArticleFields(BaseModel):
    """Structured fields attached to a resource promoted to an article.

    Attributes:
        lang: Language code, normalized unless locale preservation is on
        date: Publication date used for ordering and permalinks
        slug: URL-safe identifier substituted for :title
        tags: Tags carried by the article
        data: Arbitrary metadata used for custom permalink components
        captures: Raw strings captured from the source path, by field name
    """

    lang: str | None = None
    date: datetime
    slug: str
    tags: list[str] = []
    data: dict[str, Any] = {}
    captures: dict[str, str] = {}


class Resource(BaseModel):
    """A single site resource as handed over by the host's loader.

    Attributes:
        path: Source path, relative to the site source (unique)
        destination_path: Output path; rewritten by classification
        date: Publication date from front matter, if any
        lang: Language from front matter, if any
        slug: Slug from front matter, if any
        tags: Tags from front matter
        published: False when the front matter marks the resource as a draft
        data: Remaining front matter, used for custom permalink components
        kind: Classification of the resource
        article: Article payload, set when kind is "article"
        owner_path: Source path of the owning article, set when kind is "companion"
        controller: Opaque back-reference to the blog that claimed the resource
    """

    path: str
    destination_path: str | None = None
    date: datetime | None = None
    lang: str | None = None
    slug: str | None = None
    tags: list[str] = []
    published: bool = True
    data: dict[str, Any] = {}
    kind: Literal["plain", "article", "companion"] = "plain"
    article: ArticleFields | None = None
    owner_path: str | None = None
    controller: Any = Field(default=None, exclude=True)

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, value):
        # Front matter often carries tags as "a, b, c"
        if value is None:
            return []
        if isinstance(value, str):
            value = [tag.strip() for tag in value.split(",")]
        return list(dict.fromkeys(tag for tag in value if tag))

    def __repr__(self) -> str:
        return f"Resource({self.path!r}, kind={self.kind!r})"

    @property
    def is_article(self) -> bool:
        return self.kind == "article"
