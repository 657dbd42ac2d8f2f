"""
Subscription lifecycle: period derivation and activation
"""
import logging
from datetime import datetime
from typing import List, Optional

from shared.exceptions import ForbiddenError, NotFoundError, ValidationError
from shared.models import (
    PlanInterval,
    SubscriptionDetail,
    SubscriptionStatus,
    UserSubscription,
    utcnow,
)
from shared.storage import MemStorage
from ..utils.date_helper import add_months

logger = logging.getLogger(__name__)

INTERVAL_MONTHS = {
    PlanInterval.MONTH: 1,
    PlanInterval.YEAR: 12,
}


def compute_end_date(start_date: datetime, interval) -> datetime:
    """End of the first billing period for a plan interval."""
    try:
        months = INTERVAL_MONTHS[PlanInterval(interval)]
    except (ValueError, KeyError):
        raise ValidationError(f"Unsupported plan interval: {interval}")
    return add_months(start_date, months)


class SubscriptionService:
    def __init__(self, storage: MemStorage):
        self.storage = storage

    def create_subscription(
        self,
        user_id: int,
        product_id: int,
        plan_id: int,
        transaction_id: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> UserSubscription:
        """Create an active subscription for a product plan.

        Activation is optimistic: the subscription is active immediately,
        whatever the state of the linked crypto transaction.
        """
        product = self.storage.get_product(product_id)
        if not product:
            raise NotFoundError("Product not found")

        plan = self.storage.get_subscription_plan(plan_id)
        if not plan:
            raise NotFoundError("Subscription plan not found")

        if plan.product_id != product.id:
            raise ValidationError("Subscription plan does not belong to this product")

        if transaction_id is not None:
            transaction = self.storage.get_crypto_transaction(transaction_id)
            if not transaction:
                raise NotFoundError("Transaction not found")
            if transaction.user_id != user_id:
                raise ForbiddenError("Transaction belongs to another user")

        start_date = now or utcnow()
        end_date = compute_end_date(start_date, plan.interval)

        subscription = self.storage.create_user_subscription(UserSubscription(
            user_id=user_id,
            product_id=product.id,
            plan_id=plan.id,
            transaction_id=transaction_id,
            start_date=start_date,
            end_date=end_date,
            status=SubscriptionStatus.ACTIVE,
        ))

        logger.info(
            f"Subscription {subscription.id} created for user {user_id}: "
            f"product={product.id} plan={plan.id} ends_at={end_date.isoformat()}"
        )
        return subscription

    def get_active_subscriptions(self, user_id: int) -> List[SubscriptionDetail]:
        return self.storage.get_user_active_subscriptions(user_id)
