import logging
from typing import List, Optional, Tuple

from shared.exceptions import NotFoundError
from shared.models import Product, SubscriptionPlan
from shared.storage import MemStorage

logger = logging.getLogger(__name__)


class CatalogService:
    def __init__(self, storage: MemStorage):
        self.storage = storage

    def list_products(
        self,
        active: Optional[bool] = None,
        page: int = 1,
        page_size: int = 10,
    ) -> Tuple[List[Product], int]:
        """Filter by active flag, then paginate; total is counted before slicing."""
        return self.storage.list_products(active, page, page_size)

    def get_product_with_plans(self, product_id: int) -> Tuple[Product, List[SubscriptionPlan]]:
        result = self.storage.get_product_with_plans(product_id)
        if result is None:
            raise NotFoundError("Product not found")
        return result

    def get_product_plans(self, product_id: int) -> List[SubscriptionPlan]:
        return self.storage.get_subscription_plans_by_product(product_id)

    def create_product(self, data: dict) -> Product:
        product = self.storage.create_product(Product(**data))
        logger.info(f"Product {product.id} created: {product.name}")
        return product

    def update_product(self, product_id: int, updates: dict) -> Product:
        product = self.storage.update_product(product_id, updates)
        if not product:
            raise NotFoundError("Product not found")
        return product

    def delete_product(self, product_id: int) -> None:
        if not self.storage.delete_product(product_id):
            raise NotFoundError("Product not found")
        logger.info(f"Product {product_id} deleted")

    def get_plan(self, plan_id: int) -> SubscriptionPlan:
        plan = self.storage.get_subscription_plan(plan_id)
        if not plan:
            raise NotFoundError("Subscription plan not found")
        return plan

    def create_plan(self, data: dict) -> SubscriptionPlan:
        if not self.storage.get_product(data["product_id"]):
            raise NotFoundError("Product not found")
        plan = self.storage.create_subscription_plan(SubscriptionPlan(**data))
        logger.info(f"Plan {plan.id} created for product {plan.product_id}")
        return plan

    def update_plan(self, plan_id: int, updates: dict) -> SubscriptionPlan:
        if "product_id" in updates and not self.storage.get_product(updates["product_id"]):
            raise NotFoundError("Product not found")
        plan = self.storage.update_subscription_plan(plan_id, updates)
        if not plan:
            raise NotFoundError("Subscription plan not found")
        return plan

    def delete_plan(self, plan_id: int) -> None:
        if not self.storage.delete_subscription_plan(plan_id):
            raise NotFoundError("Subscription plan not found")
        logger.info(f"Plan {plan_id} deleted")
