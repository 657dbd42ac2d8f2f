"""
Payment gateway client for card checkout (Stripe payment intents)
"""
import logging
from typing import Any, Dict, Optional

import httpx

from shared.config.settings import Settings
from shared.exceptions import PaymentGatewayError

logger = logging.getLogger(__name__)


class PaymentGateway:
    def __init__(
        self,
        api_key: Optional[str],
        api_base: str = "https://api.stripe.com",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(cls, app_settings: Settings) -> "PaymentGateway":
        return cls(
            api_key=app_settings.stripe_secret_key,
            api_base=app_settings.stripe_api_base,
            timeout=app_settings.payment_timeout,
        )

    async def create_payment_intent(
        self,
        amount: int,
        currency: str = "usd",
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Create a payment intent for ``amount`` minor units"""
        if not self.api_key:
            raise PaymentGatewayError("Payment gateway is not configured")

        form = {"amount": str(amount), "currency": currency}
        for key, value in (metadata or {}).items():
            form[f"metadata[{key}]"] = str(value)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    f"{self.api_base}/v1/payment_intents",
                    auth=(self.api_key, ""),
                    data=form,
                )
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Payment gateway request failed: {e}")
            raise PaymentGatewayError("Payment gateway unavailable") from e

        if response.status_code >= 400:
            message = data.get("error", {}).get("message", "Payment gateway rejected the request")
            logger.error(f"Payment intent rejected ({response.status_code}): {message}")
            raise PaymentGatewayError(message)

        return data
