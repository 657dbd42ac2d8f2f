from fastapi import APIRouter, Depends, status
from pydantic import Field
from typing import List, Optional

from shared.config.database import get_storage
from shared.models import PlanInterval, Schema, SubscriptionPlan
from shared.storage import MemStorage
from ..dependencies import require_admin
from ..services import CatalogService

router = APIRouter()


class PlanCreate(Schema):
    product_id: int
    name: str = Field(..., min_length=1)
    price: int = Field(..., ge=0)
    price_crypto: int = Field(..., ge=0)
    crypto_currency: str = "ETH"
    interval: PlanInterval
    features: List[str] = Field(default_factory=list)
    is_popular: bool = False


class PlanUpdate(Schema):
    product_id: Optional[int] = None
    name: Optional[str] = Field(None, min_length=1)
    price: Optional[int] = Field(None, ge=0)
    price_crypto: Optional[int] = Field(None, ge=0)
    crypto_currency: Optional[str] = None
    interval: Optional[PlanInterval] = None
    features: Optional[List[str]] = None
    is_popular: Optional[bool] = None


@router.get("/{plan_id}", response_model=SubscriptionPlan)
async def get_plan(plan_id: int, storage: MemStorage = Depends(get_storage)):
    return CatalogService(storage).get_plan(plan_id)


@router.post(
    "",
    response_model=SubscriptionPlan,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)]
)
async def create_plan(payload: PlanCreate, storage: MemStorage = Depends(get_storage)):
    return CatalogService(storage).create_plan(payload.model_dump())


@router.patch("/{plan_id}", response_model=SubscriptionPlan, dependencies=[Depends(require_admin)])
async def update_plan(plan_id: int, payload: PlanUpdate, storage: MemStorage = Depends(get_storage)):
    return CatalogService(storage).update_plan(plan_id, payload.changes())


@router.delete("/{plan_id}", dependencies=[Depends(require_admin)])
async def delete_plan(plan_id: int, storage: MemStorage = Depends(get_storage)):
    CatalogService(storage).delete_plan(plan_id)
    return {"message": "Subscription plan deleted successfully"}
