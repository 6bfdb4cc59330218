from typing import Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SeoImage(BaseModel):
    url: str
    width: Optional[Union[int, float, str]] = None
    height: Optional[Union[int, float, str]] = None


class SeoFields(BaseModel):
    """Derived head metadata for one page. Serialised with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    title: str  # full <title>
    page_title: str
    site_title: str
    description: str  # double quotes escaped for use in content="..."
    canonical_url: str
    date: Optional[str] = None  # articles only
    image: Optional[SeoImage] = None
    twitter_account: str
    author: str
    locale: str
    json_ld: str
