"""
Card checkout: payment intents created through the external gateway
"""
from fastapi import APIRouter, Depends
import logging

from shared.config.database import get_storage
from shared.models import Schema, User
from shared.storage import MemStorage
from ..dependencies import get_current_user, get_payment_gateway
from ..services import CatalogService, PaymentGateway

logger = logging.getLogger(__name__)

router = APIRouter()


class PaymentIntentRequest(Schema):
    plan_id: int


class PaymentIntentResponse(Schema):
    client_secret: str


@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
async def create_payment_intent(
    payload: PaymentIntentRequest,
    user: User = Depends(get_current_user),
    storage: MemStorage = Depends(get_storage),
    gateway: PaymentGateway = Depends(get_payment_gateway)
):
    """Create a gateway payment intent for a plan's price"""
    plan = CatalogService(storage).get_plan(payload.plan_id)

    intent = await gateway.create_payment_intent(
        amount=plan.price,
        currency="usd",
        metadata={
            "userId": user.id,
            "planId": plan.id,
            "productId": plan.product_id,
        },
    )
    logger.info(f"Payment intent {intent.get('id')} created for user {user.id}, plan {plan.id}")

    return PaymentIntentResponse(client_secret=intent["client_secret"])
