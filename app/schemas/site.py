from typing import List, Optional

from pydantic import BaseModel, Field

from app.schemas.links import CircleLink


class Homepage(BaseModel):
    title: str
    descriptions: List[str] = Field(default_factory=list)
    logo: Optional[str] = None
    links: List[CircleLink] = Field(default_factory=list)
