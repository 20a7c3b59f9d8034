from typing import List, Optional

from pydantic import BaseModel, Field


class PostSummary(BaseModel):
    address: str
    slug: str
    title: str
    description: Optional[str] = None
    date: str
    categories: List[str] = Field(default_factory=list)
    aliases: List[str] = Field(default_factory=list)
    draft: bool = False
    readingTime: Optional[str] = None
    markup: str = "markdown"
    source: Optional[str] = None


class PostDetail(PostSummary):
    body: str


class CategoryCount(BaseModel):
    name: str
    count: int


class AliasResolution(BaseModel):
    path: str
    canonical: str
    title: str
