"""
In-memory entity store.

Every entity type lives in its own ``Table``. Methods are synchronous and run
to completion without yielding, so a single event loop never observes a
half-applied write.
"""
from datetime import datetime
from typing import List, Optional, Tuple

from ..exceptions import NotFoundError
from ..models import (
    BlogPost,
    ContentPage,
    CryptoTransaction,
    EmailTemplate,
    Product,
    SubscriptionDetail,
    SubscriptionPlan,
    SubscriptionStatus,
    TransactionStatus,
    User,
    UserSubscription,
)
from .table import Table, paginate


class MemStorage:
    def __init__(self):
        self.users: Table[User] = Table("users")
        self.products: Table[Product] = Table("products")
        self.subscription_plans: Table[SubscriptionPlan] = Table("subscription_plans")
        self.user_subscriptions: Table[UserSubscription] = Table("user_subscriptions")
        self.crypto_transactions: Table[CryptoTransaction] = Table("crypto_transactions")
        self.blog_posts: Table[BlogPost] = Table("blog_posts")
        self.email_templates: Table[EmailTemplate] = Table("email_templates")
        self.content_pages: Table[ContentPage] = Table("content_pages")

    # ---------- Users ----------
    def get_user(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        username = username.lower()
        return self.users.find(lambda user: user.username.lower() == username)

    def get_user_by_email(self, email: str) -> Optional[User]:
        email = email.lower()
        return self.users.find(lambda user: user.email.lower() == email)

    def create_user(self, user: User) -> User:
        return self.users.insert(user)

    def update_user(self, user_id: int, updates: dict) -> Optional[User]:
        return self.users.update(user_id, updates)

    def delete_user(self, user_id: int) -> bool:
        return self.users.delete(user_id)

    def list_users(self, page: int = 1, page_size: int = 10) -> Tuple[List[User], int]:
        return paginate(self.users.all(), page, page_size)

    def all_users(self) -> List[User]:
        return self.users.all()

    def update_wallet_address(self, user_id: int, wallet_address: str) -> User:
        user = self.users.update(user_id, {"wallet_address": wallet_address})
        if user is None:
            raise NotFoundError("User not found")
        return user

    # ---------- Products ----------
    def get_product(self, product_id: int) -> Optional[Product]:
        return self.products.get(product_id)

    def create_product(self, product: Product) -> Product:
        return self.products.insert(product)

    def update_product(self, product_id: int, updates: dict) -> Optional[Product]:
        return self.products.update(product_id, updates)

    def delete_product(self, product_id: int) -> bool:
        # Plans and subscriptions referencing the product are left in place;
        # joined reads skip them.
        return self.products.delete(product_id)

    def list_products(
        self,
        active: Optional[bool] = None,
        page: int = 1,
        page_size: int = 10,
    ) -> Tuple[List[Product], int]:
        products = self.products.all()
        if active is not None:
            products = [product for product in products if product.is_active == active]
        return paginate(products, page, page_size)

    def get_product_with_plans(self, product_id: int) -> Optional[Tuple[Product, List[SubscriptionPlan]]]:
        product = self.get_product(product_id)
        if product is None:
            return None
        return product, self.get_subscription_plans_by_product(product_id)

    # ---------- Subscription plans ----------
    def get_subscription_plan(self, plan_id: int) -> Optional[SubscriptionPlan]:
        return self.subscription_plans.get(plan_id)

    def create_subscription_plan(self, plan: SubscriptionPlan) -> SubscriptionPlan:
        return self.subscription_plans.insert(plan)

    def update_subscription_plan(self, plan_id: int, updates: dict) -> Optional[SubscriptionPlan]:
        return self.subscription_plans.update(plan_id, updates)

    def delete_subscription_plan(self, plan_id: int) -> bool:
        return self.subscription_plans.delete(plan_id)

    def get_subscription_plans_by_product(self, product_id: int) -> List[SubscriptionPlan]:
        return self.subscription_plans.filter(lambda plan: plan.product_id == product_id)

    # ---------- Crypto transactions ----------
    def create_crypto_transaction(self, transaction: CryptoTransaction) -> CryptoTransaction:
        return self.crypto_transactions.insert(transaction.model_copy(update={"confirmed_at": None}))

    def get_crypto_transaction(self, transaction_id: int) -> Optional[CryptoTransaction]:
        return self.crypto_transactions.get(transaction_id)

    def get_transaction_by_tx_hash(self, tx_hash: str) -> Optional[CryptoTransaction]:
        return self.crypto_transactions.find(lambda tx: tx.tx_hash == tx_hash)

    def update_transaction_status(
        self,
        transaction_id: int,
        status: TransactionStatus,
        confirmed_at: Optional[datetime] = None,
    ) -> CryptoTransaction:
        """Set ``status``; ``confirmed_at`` is only ever written on completion."""
        transaction = self.crypto_transactions.get(transaction_id)
        if transaction is None:
            raise NotFoundError("Transaction not found")

        updates = {"status": status}
        if status == TransactionStatus.COMPLETED and confirmed_at is not None:
            updates["confirmed_at"] = confirmed_at

        return self.crypto_transactions.update(transaction_id, updates)

    def get_user_transactions(self, user_id: int) -> List[CryptoTransaction]:
        transactions = self.crypto_transactions.filter(lambda tx: tx.user_id == user_id)
        # Most recent first; ids break ties between same-instant inserts
        return sorted(transactions, key=lambda tx: (tx.created_at, tx.id), reverse=True)

    def list_transactions(self, status: Optional[TransactionStatus] = None) -> List[CryptoTransaction]:
        if status is None:
            return self.crypto_transactions.all()
        return self.crypto_transactions.filter(lambda tx: tx.status == status)

    # ---------- User subscriptions ----------
    def get_user_subscription(self, subscription_id: int) -> Optional[UserSubscription]:
        return self.user_subscriptions.get(subscription_id)

    def create_user_subscription(self, subscription: UserSubscription) -> UserSubscription:
        return self.user_subscriptions.insert(subscription)

    def update_user_subscription(self, subscription_id: int, updates: dict) -> Optional[UserSubscription]:
        return self.user_subscriptions.update(subscription_id, updates)

    def get_user_subscriptions(self, user_id: int) -> List[UserSubscription]:
        return self.user_subscriptions.filter(lambda sub: sub.user_id == user_id)

    def get_user_active_subscriptions(self, user_id: int) -> List[SubscriptionDetail]:
        subscriptions = self.user_subscriptions.filter(
            lambda sub: sub.user_id == user_id and sub.status == SubscriptionStatus.ACTIVE
        )

        result = []
        for sub in subscriptions:
            product = self.products.get(sub.product_id)
            plan = self.subscription_plans.get(sub.plan_id)
            if product is None or plan is None:
                continue
            result.append(SubscriptionDetail(**sub.model_dump(), product=product, plan=plan))
        return result

    # ---------- Blog posts ----------
    def get_blog_post(self, post_id: int) -> Optional[BlogPost]:
        return self.blog_posts.get(post_id)

    def get_blog_post_by_slug(self, slug: str) -> Optional[BlogPost]:
        return self.blog_posts.find(lambda post: post.slug == slug)

    def create_blog_post(self, post: BlogPost) -> BlogPost:
        return self.blog_posts.insert(post)

    def update_blog_post(self, post_id: int, updates: dict) -> Optional[BlogPost]:
        return self.blog_posts.update(post_id, updates)

    def delete_blog_post(self, post_id: int) -> bool:
        return self.blog_posts.delete(post_id)

    def list_blog_posts(
        self,
        published: Optional[bool] = None,
        page: int = 1,
        page_size: int = 10,
    ) -> Tuple[List[BlogPost], int]:
        posts = self.blog_posts.all()
        if published is not None:
            posts = [post for post in posts if post.is_published == published]

        # Most recent first by publish date, falling back to creation date
        posts.sort(key=lambda post: (post.published_at or post.created_at, post.id), reverse=True)
        return paginate(posts, page, page_size)

    # ---------- Email templates ----------
    def get_email_template(self, template_id: int) -> Optional[EmailTemplate]:
        return self.email_templates.get(template_id)

    def get_email_template_by_name(self, name: str) -> Optional[EmailTemplate]:
        return self.email_templates.find(lambda template: template.name == name)

    def create_email_template(self, template: EmailTemplate) -> EmailTemplate:
        return self.email_templates.insert(template)

    def update_email_template(self, template_id: int, updates: dict) -> Optional[EmailTemplate]:
        return self.email_templates.update(template_id, updates)

    def delete_email_template(self, template_id: int) -> bool:
        return self.email_templates.delete(template_id)

    def list_email_templates(self) -> List[EmailTemplate]:
        return self.email_templates.all()

    # ---------- Content pages ----------
    def get_content_page(self, page_id: int) -> Optional[ContentPage]:
        return self.content_pages.get(page_id)

    def get_content_page_by_slug(self, slug: str) -> Optional[ContentPage]:
        return self.content_pages.find(lambda page: page.slug == slug)

    def create_content_page(self, page: ContentPage) -> ContentPage:
        return self.content_pages.insert(page)

    def update_content_page(self, page_id: int, updates: dict) -> Optional[ContentPage]:
        return self.content_pages.update(page_id, updates)

    def delete_content_page(self, page_id: int) -> bool:
        return self.content_pages.delete(page_id)

    def list_content_pages(self, published: Optional[bool] = None) -> List[ContentPage]:
        if published is None:
            return self.content_pages.all()
        return self.content_pages.filter(lambda page: page.is_published == published)
