from fastapi import APIRouter, Depends, status
from pydantic import Field
from typing import List, Optional

from shared.config.database import get_storage
from shared.models import EmailTemplate, Schema
from shared.storage import MemStorage
from ..services import ContentService

# Admin-only; the dependency is attached when the router is mounted
router = APIRouter()


class EmailTemplateCreate(Schema):
    name: str = Field(..., min_length=1)
    subject: str
    content: str


class EmailTemplateUpdate(Schema):
    name: Optional[str] = Field(None, min_length=1)
    subject: Optional[str] = None
    content: Optional[str] = None


@router.get("", response_model=List[EmailTemplate])
async def list_email_templates(storage: MemStorage = Depends(get_storage)):
    return storage.list_email_templates()


@router.get("/{template_id}", response_model=EmailTemplate)
async def get_email_template(template_id: int, storage: MemStorage = Depends(get_storage)):
    return ContentService(storage).get_email_template(template_id)


@router.post("", response_model=EmailTemplate, status_code=status.HTTP_201_CREATED)
async def create_email_template(payload: EmailTemplateCreate, storage: MemStorage = Depends(get_storage)):
    return ContentService(storage).create_email_template(payload.model_dump())


@router.patch("/{template_id}", response_model=EmailTemplate)
async def update_email_template(
    template_id: int,
    payload: EmailTemplateUpdate,
    storage: MemStorage = Depends(get_storage)
):
    return ContentService(storage).update_email_template(
        template_id, payload.changes()
    )


@router.delete("/{template_id}")
async def delete_email_template(template_id: int, storage: MemStorage = Depends(get_storage)):
    ContentService(storage).delete_email_template(template_id)
    return {"message": "Email template deleted successfully"}
