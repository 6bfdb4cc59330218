from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Site(BaseModel):
    """Build-wide site configuration, read from ``_data/site.json``.

    The ``url`` is the site origin without a trailing slash; page URLs are
    appended to it verbatim.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    title: str
    tagline: str = ""
    description: str = ""
    author: str = ""
    locale: str = "en_US"
    url: str
    twitter: str = ""
    cloudinary_cloud_name: Optional[str] = None
