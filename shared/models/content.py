from typing import Optional
from datetime import datetime
from .base import TimestampedModel


class BlogPost(TimestampedModel):
    title: str
    slug: str
    content: str  # HTML
    excerpt: str
    featured_image: Optional[str] = None
    author_id: int
    is_published: bool = False
    published_at: Optional[datetime] = None


class ContentPage(TimestampedModel):
    title: str
    slug: str
    content: str  # HTML
    is_published: bool = True


class EmailTemplate(TimestampedModel):
    name: str
    subject: str
    content: str  # with {{placeholder}} tokens
