from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

ARTICLE = "article"


class ImageRef(BaseModel):
    """Social-preview image declared in a page's front matter."""

    path: str
    # Passed through as written in front matter
    width: Optional[Union[int, float, str]] = None
    height: Optional[Union[int, float, str]] = None


class PageContext(BaseModel):
    """Per-page data: generator-supplied ``url``/``date`` merged with front matter.

    ``title``, ``description``, ``image`` and ``seo_page_type`` are optional
    overrides that shadow the site-wide defaults.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    url: str = ""
    date: Optional[datetime] = None
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[ImageRef] = None
    seo_page_type: Optional[str] = None

    @property
    def is_article(self) -> bool:
        return self.seo_page_type == ARTICLE

    @model_validator(mode="after")
    def _articles_are_dated(self) -> "PageContext":
        if self.is_article and self.date is None:
            raise ValueError("pages with seoPageType 'article' must have a date")
        return self
