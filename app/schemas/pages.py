from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class PageSummary(BaseModel):
    slug: str
    title: str
    excerpt: str = ""
    order: Optional[int] = None
    tags: List[str] = Field(default_factory=list)
    extra: Dict[str, Any] = Field(default_factory=dict)


class PageDetail(PageSummary):
    content: str
