from typing import List, Optional

from pydantic import BaseModel, Field


class CircleLink(BaseModel):
    url: str
    title: str
    icon: str
    external: bool = False


class CircleLinks(BaseModel):
    links: List[CircleLink] = Field(default_factory=list)
    className: Optional[str] = None
