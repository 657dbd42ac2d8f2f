from fastapi import APIRouter, Depends, status
from pydantic import Field
from typing import List, Optional

from shared.config.database import get_storage
from shared.models import ContentPage, Schema
from shared.storage import MemStorage
from ..dependencies import require_admin
from ..services import ContentService
from .blog_router import SLUG_PATTERN

router = APIRouter()


class ContentPageCreate(Schema):
    title: str = Field(..., min_length=1)
    slug: str = Field(..., pattern=SLUG_PATTERN)
    content: str
    is_published: bool = True


class ContentPageUpdate(Schema):
    title: Optional[str] = Field(None, min_length=1)
    slug: Optional[str] = Field(None, pattern=SLUG_PATTERN)
    content: Optional[str] = None
    is_published: Optional[bool] = None


@router.get("", response_model=List[ContentPage])
async def list_content_pages(published: Optional[bool] = None, storage: MemStorage = Depends(get_storage)):
    return storage.list_content_pages(published)


@router.get("/slug/{slug}", response_model=ContentPage)
async def get_content_page_by_slug(slug: str, storage: MemStorage = Depends(get_storage)):
    return ContentService(storage).get_content_page_by_slug(slug)


@router.get("/{page_id}", response_model=ContentPage)
async def get_content_page(page_id: int, storage: MemStorage = Depends(get_storage)):
    return ContentService(storage).get_content_page(page_id)


@router.post(
    "",
    response_model=ContentPage,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)]
)
async def create_content_page(payload: ContentPageCreate, storage: MemStorage = Depends(get_storage)):
    return ContentService(storage).create_content_page(payload.model_dump())


@router.patch("/{page_id}", response_model=ContentPage, dependencies=[Depends(require_admin)])
async def update_content_page(
    page_id: int,
    payload: ContentPageUpdate,
    storage: MemStorage = Depends(get_storage)
):
    return ContentService(storage).update_content_page(page_id, payload.changes())


@router.delete("/{page_id}", dependencies=[Depends(require_admin)])
async def delete_content_page(page_id: int, storage: MemStorage = Depends(get_storage)):
    ContentService(storage).delete_content_page(page_id)
    return {"message": "Content page deleted successfully"}
