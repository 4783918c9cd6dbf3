import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PostAttributes(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    title: str
    author: str = ""
    postDate: str = ""
    tags: str = ""
    draft: bool = False

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("title must not be empty")
        return value

    @field_validator("author", "postDate", "tags", mode="before")
    @classmethod
    def none_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("postDate", mode="before")
    @classmethod
    def date_to_string(cls, value):
        # YAML turns bare dates into date/datetime objects
        if isinstance(value, (datetime.date, datetime.datetime)):
            return value.isoformat()
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def list_to_string(cls, value):
        if isinstance(value, (list, tuple)):
            return ",".join(str(item) for item in value if item is not None)
        return value

    @field_validator("draft", mode="before")
    @classmethod
    def none_to_false(cls, value):
        return False if value is None else value


class Post(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    title: str
    author: str = ""
    postDate: str = ""
    tags: List[str] = Field(default_factory=list)
    draft: bool = False
    permalink: str
    excerpt: str = ""
    readingTime: str
    relativeDate: str = ""


class PostDetail(Post):
    html: str


class TagListing(BaseModel):
    tag: str
    posts: List[Post] = Field(default_factory=list)
