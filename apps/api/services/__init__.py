from .catalog_service import CatalogService
from .content_service import ContentService
from .payment_service import PaymentGateway
from .stats_service import StatsService
from .subscription_service import SubscriptionService
from .transaction_service import TransactionService
from .user_service import UserService

__all__ = [
    "CatalogService",
    "ContentService",
    "PaymentGateway",
    "StatsService",
    "SubscriptionService",
    "TransactionService",
    "UserService",
]
