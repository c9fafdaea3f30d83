from typing import Dict, Optional

from pydantic import BaseModel, Field


class PostSummary(BaseModel):
    name: str
    title: Optional[str] = None
    date: Optional[str] = None
    link: str
    content: str  # Rendered HTML of the abridged body


class PostDetail(BaseModel):
    slug: str
    title: Optional[str] = None
    date: Optional[str] = None
    metadata: Dict[str, str] = Field(default_factory=dict)
    content: str  # Markdown content without front matter


class AboutInfo(BaseModel):
    title: str
    description: str
    source_url: Optional[str] = None
