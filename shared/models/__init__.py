from .base import BaseModel, Schema, TimestampedModel, utcnow
from .user import User, UserResponse, UserRole
from .product import Product, ProductPublic, SubscriptionPlan, PlanInterval
from .transaction import CryptoTransaction, TransactionStatus
from .subscription import UserSubscription, SubscriptionDetail, SubscriptionStatus
from .content import BlogPost, ContentPage, EmailTemplate

__all__ = [
    "BaseModel",
    "Schema",
    "TimestampedModel",
    "utcnow",
    "User",
    "UserResponse",
    "UserRole",
    "Product",
    "ProductPublic",
    "SubscriptionPlan",
    "PlanInterval",
    "CryptoTransaction",
    "TransactionStatus",
    "UserSubscription",
    "SubscriptionDetail",
    "SubscriptionStatus",
    "BlogPost",
    "ContentPage",
    "EmailTemplate"
]
