"""
Admin dashboard aggregates
"""
from typing import Any, Dict

from shared.models import PlanInterval, TransactionStatus
from shared.storage import MemStorage

TOP_PRODUCTS_LIMIT = 3


def monthly_price(price: int, interval: PlanInterval) -> float:
    """Monthly-equivalent of a plan price, in minor units."""
    if interval == PlanInterval.YEAR:
        return price / 12
    return price


class StatsService:
    def __init__(self, storage: MemStorage):
        self.storage = storage

    def compute_stats(self) -> Dict[str, Any]:
        """Recompute dashboard totals from scratch.

        Walks every user and each of their active subscriptions, so the cost is
        O(users x subscriptions per user) on every call.
        """
        users = self.storage.all_users()

        active_subscriptions = 0
        monthly_revenue = 0.0
        per_product: Dict[int, Dict[str, Any]] = {}

        for user in users:
            for sub in self.storage.get_user_active_subscriptions(user.id):
                active_subscriptions += 1
                revenue = monthly_price(sub.plan.price, sub.plan.interval)
                monthly_revenue += revenue

                entry = per_product.setdefault(sub.product.id, {
                    "id": sub.product.id,
                    "name": sub.product.name,
                    "subscriptions": 0,
                    "revenue": 0.0,
                })
                entry["subscriptions"] += 1
                entry["revenue"] += revenue

        top_products = sorted(per_product.values(), key=lambda p: (-p["subscriptions"], p["id"]))
        top_products = [
            dict(product, revenue=round(product["revenue"] / 100, 2))
            for product in top_products[:TOP_PRODUCTS_LIMIT]
        ]

        return {
            "total_users": len(users),
            "total_products": len(self.storage.products),
            "active_subscriptions": active_subscriptions,
            # Convert cents to dollars
            "monthly_revenue": round(monthly_revenue / 100, 2),
            "pending_transactions": len(self.storage.list_transactions(TransactionStatus.PENDING)),
            "top_products": top_products,
        }
