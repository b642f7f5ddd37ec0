from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class PostSummary(BaseModel):
    slug: str
    title: str
    date: Optional[str] = None
    excerpt: str = ""
    tags: List[str] = Field(default_factory=list)
    readingTime: str
    extra: Dict[str, Any] = Field(default_factory=dict)


class PostDetail(PostSummary):
    content: str


class TagCount(BaseModel):
    tag: str
    count: int
