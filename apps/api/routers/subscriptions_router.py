from fastapi import APIRouter, Depends, status
from typing import List, Optional

from shared.config.database import get_storage
from shared.models import Schema, SubscriptionDetail, User, UserSubscription
from shared.storage import MemStorage
from ..dependencies import get_current_user
from ..services import SubscriptionService

router = APIRouter()


class SubscriptionCreate(Schema):
    product_id: int
    plan_id: int
    transaction_id: Optional[int] = None


@router.post("", response_model=UserSubscription, status_code=status.HTTP_201_CREATED)
async def create_subscription(
    payload: SubscriptionCreate,
    user: User = Depends(get_current_user),
    storage: MemStorage = Depends(get_storage)
):
    """Subscribe the current user to a product plan"""
    return SubscriptionService(storage).create_subscription(
        user_id=user.id,
        product_id=payload.product_id,
        plan_id=payload.plan_id,
        transaction_id=payload.transaction_id,
    )


@router.get("", response_model=List[SubscriptionDetail])
async def list_active_subscriptions(
    user: User = Depends(get_current_user),
    storage: MemStorage = Depends(get_storage)
):
    return SubscriptionService(storage).get_active_subscriptions(user.id)
