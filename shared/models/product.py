from enum import Enum
from typing import List, Optional
from pydantic import Field
from .base import BaseModel, TimestampedModel


class PlanInterval(str, Enum):
    MONTH = "month"
    YEAR = "year"


class Product(TimestampedModel):
    name: str
    description: str
    short_description: str
    images: List[str] = Field(default_factory=list)
    platforms: List[str] = Field(default_factory=list)
    download_link: Optional[str] = None
    zip_password: Optional[str] = None
    is_active: bool = True


class SubscriptionPlan(BaseModel):
    product_id: int

    name: str  # Monthly, Annual
    price: int  # minor currency units (cents)
    price_crypto: int  # thousandths of crypto_currency
    crypto_currency: str = "ETH"
    interval: PlanInterval

    features: List[str] = Field(default_factory=list)
    is_popular: bool = False


class ProductPublic(TimestampedModel):
    """Catalogue view of a product; download details are for subscribers only."""

    name: str
    description: str
    short_description: str
    images: List[str] = Field(default_factory=list)
    platforms: List[str] = Field(default_factory=list)
    is_active: bool = True

    @classmethod
    def from_product(cls, product: Product) -> "ProductPublic":
        return cls.model_validate(product, from_attributes=True)
