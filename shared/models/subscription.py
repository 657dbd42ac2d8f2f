from enum import Enum
from typing import Optional
from datetime import datetime
from .base import BaseModel
from .product import Product, SubscriptionPlan


class SubscriptionStatus(str, Enum):
    ACTIVE = "active"
    PENDING = "pending"
    EXPIRED = "expired"


class UserSubscription(BaseModel):
    user_id: int
    product_id: int
    plan_id: int
    transaction_id: Optional[int] = None

    # Timing
    start_date: datetime
    end_date: datetime

    # Status
    status: SubscriptionStatus = SubscriptionStatus.ACTIVE
    renewal_key: Optional[str] = None


class SubscriptionDetail(UserSubscription):
    """Subscription joined with its product and plan."""

    product: Product
    plan: SubscriptionPlan
