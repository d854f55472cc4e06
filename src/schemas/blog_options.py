"""Blog configuration schema."""

from pydantic import BaseModel, field_validator


class BlogOptions(BaseModel):
    """Options for a single blog within a site.

    Attributes:
        sources: Source path template for articles
        permalink: Output path template for articles
        preserve_locale: Keep article languages exactly as given
        environment: Host environment name; drafts are only built in "development"
        index_file: Directory index file name stripped from companion destinations
        default_locale: Language used by language-filtered queries when none is given
    """

    sources: str = ":year-:month-:day-:title.html"
    permalink: str = ":year/:month/:day/:title.html"
    preserve_locale: bool = False
    environment: str = "development"
    index_file: str = "index.html"
    default_locale: str | None = None

    model_config = {"extra": "forbid"}

    @field_validator("sources", "permalink")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("template must not be empty")
        return value

    @property
    def is_development(self) -> bool:
        return self.environment == "development"
