from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MarkdownRequest(BaseModel):
    markdown: str


class MarkdownResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    html: str
    toc_present: bool


class FeedEntry(BaseModel):
    url: str
    title: str
    date: datetime
    content: str = ""  # rendered HTML body


class FeedRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    entries: List[FeedEntry] = Field(default_factory=list)
    feed_path: str = Field(
        default="/feed.xml",
        description="Site-relative path the feed is published at.",
    )
