from fastapi import APIRouter, Depends, Query, status
from pydantic import Field
from typing import List, Optional

from shared.config.database import get_settings, get_storage
from shared.config.settings import Settings
from shared.models import BlogPost, Schema, User
from shared.storage import MemStorage
from ..dependencies import page_size_for, require_admin
from ..services import ContentService

router = APIRouter()

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


class BlogPostCreate(Schema):
    title: str = Field(..., min_length=1)
    slug: str = Field(..., pattern=SLUG_PATTERN)
    content: str
    excerpt: str
    featured_image: Optional[str] = None
    is_published: bool = False


class BlogPostUpdate(Schema):
    title: Optional[str] = Field(None, min_length=1)
    slug: Optional[str] = Field(None, pattern=SLUG_PATTERN)
    content: Optional[str] = None
    excerpt: Optional[str] = None
    featured_image: Optional[str] = None
    is_published: Optional[bool] = None


class BlogPostListResponse(Schema):
    posts: List[BlogPost]
    total: int
    page: int
    page_size: int


@router.get("", response_model=BlogPostListResponse)
async def list_blog_posts(
    page: int = Query(1, ge=1),
    page_size: Optional[int] = Query(None, alias="pageSize", ge=1),
    published: Optional[bool] = None,
    storage: MemStorage = Depends(get_storage),
    app_settings: Settings = Depends(get_settings)
):
    """Blog posts, newest first"""
    page_size = page_size_for(app_settings, page_size)
    posts, total = storage.list_blog_posts(published, page, page_size)
    return BlogPostListResponse(posts=posts, total=total, page=page, page_size=page_size)


@router.get("/slug/{slug}", response_model=BlogPost)
async def get_blog_post_by_slug(slug: str, storage: MemStorage = Depends(get_storage)):
    return ContentService(storage).get_blog_post_by_slug(slug)


@router.get("/{post_id}", response_model=BlogPost)
async def get_blog_post(post_id: int, storage: MemStorage = Depends(get_storage)):
    return ContentService(storage).get_blog_post(post_id)


@router.post("", response_model=BlogPost, status_code=status.HTTP_201_CREATED)
async def create_blog_post(
    payload: BlogPostCreate,
    admin: User = Depends(require_admin),
    storage: MemStorage = Depends(get_storage)
):
    """Create a post authored by the calling admin"""
    return ContentService(storage).create_blog_post(payload.model_dump(), author_id=admin.id)


@router.patch("/{post_id}", response_model=BlogPost, dependencies=[Depends(require_admin)])
async def update_blog_post(
    post_id: int,
    payload: BlogPostUpdate,
    storage: MemStorage = Depends(get_storage)
):
    return ContentService(storage).update_blog_post(post_id, payload.changes(nullable=("featured_image",)))


@router.delete("/{post_id}", dependencies=[Depends(require_admin)])
async def delete_blog_post(post_id: int, storage: MemStorage = Depends(get_storage)):
    ContentService(storage).delete_blog_post(post_id)
    return {"message": "Blog post deleted successfully"}
