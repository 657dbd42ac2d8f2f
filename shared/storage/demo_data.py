"""
Demo catalogue loaded into a fresh store when ``seed_demo_data`` is on.
"""
import logging

from ..models import (
    BlogPost,
    ContentPage,
    EmailTemplate,
    PlanInterval,
    Product,
    SubscriptionPlan,
    User,
    UserRole,
    utcnow,
)
from ..security import hash_password
from .mem_storage import MemStorage

logger = logging.getLogger(__name__)


DEMO_PRODUCTS = [
    {
        "product": {
            "name": "Cloud Defender Pro",
            "short_description": "Enterprise-grade security solution with advanced threat detection",
            "description": "Cloud Defender Pro is an enterprise-grade security solution that provides advanced threat detection, network monitoring, and data loss prevention capabilities for businesses of all sizes.",
            "images": ["https://images.unsplash.com/photo-1551288049-bebda4e38f71"],
            "platforms": ["Windows", "macOS", "Linux"],
            "download_link": "https://download.example.com/cloud-defender",
            "zip_password": "securepass123",
        },
        "plans": [
            ("Monthly", 1999, 10, PlanInterval.MONTH, ["Basic security features", "Email support", "5 devices"], False),
            ("Annual", 17988, 100, PlanInterval.YEAR, ["All security features", "Priority support", "10 devices"], True),
        ],
    },
    {
        "product": {
            "name": "DataSync Pro",
            "short_description": "Seamless data synchronization and backup solution for teams",
            "description": "DataSync Pro provides seamless data synchronization and backup solutions for teams with end-to-end encryption and version history for complete data protection.",
            "images": ["https://images.unsplash.com/photo-1558655146-d09347e92766"],
            "platforms": ["Windows", "macOS", "iOS", "Android"],
            "download_link": "https://download.example.com/datasync",
            "zip_password": "datasync456",
        },
        "plans": [
            ("Monthly", 1499, 8, PlanInterval.MONTH, ["10GB storage", "Basic sync", "3 devices"], False),
            ("Annual", 13188, 75, PlanInterval.YEAR, ["50GB storage", "Advanced sync", "Unlimited devices"], True),
        ],
    },
    {
        "product": {
            "name": "DevOps Toolkit",
            "short_description": "Comprehensive suite for CI/CD and application monitoring",
            "description": "A comprehensive suite of development and operations tools for continuous integration, deployment, and monitoring of applications.",
            "images": ["https://images.unsplash.com/photo-1541462608143-67571c6738dd"],
            "platforms": ["Windows", "macOS", "Linux"],
            "download_link": "https://download.example.com/devops",
            "zip_password": "devops789",
        },
        "plans": [
            ("Monthly", 2999, 15, PlanInterval.MONTH, ["5 repositories", "CI/CD pipeline", "Basic monitoring"], False),
            ("Annual", 28788, 150, PlanInterval.YEAR, ["Unlimited repositories", "Advanced CI/CD", "Full monitoring suite"], True),
        ],
    },
]

DEMO_EMAIL_TEMPLATES = [
    ("welcome", "Welcome to Mechxer!",
     "Hello {{username}},\n\nWelcome to Mechxer! We're excited to have you on board."),
    ("subscription_confirmation", "Your Subscription Confirmation",
     "Hello {{username}},\n\nThank you for subscribing to {{productName}}. Your subscription is now active."),
    ("subscription_expiry", "Your Subscription is About to Expire",
     "Hello {{username}},\n\nYour subscription to {{productName}} will expire on {{expiryDate}}."),
]

DEMO_CONTENT_PAGES = [
    ("About Us", "about", "<h1>About Mechxer</h1><p>Mechxer is a premium software subscription marketplace offering high-quality software solutions for professionals and businesses.</p>"),
    ("Privacy Policy", "privacy", "<h1>Privacy Policy</h1><p>At Mechxer, we take your privacy seriously...</p>"),
    ("Terms & Conditions", "terms", "<h1>Terms & Conditions</h1><p>By using Mechxer, you agree to the following terms...</p>"),
    ("DMCA", "dmca", "<h1>DMCA Policy</h1><p>Mechxer respects the intellectual property rights of others...</p>"),
    ("Contact Us", "contact", "<h1>Contact Us</h1><p>Have questions? We're here to help...</p>"),
]


def seed_demo_data(storage: MemStorage) -> None:
    admin = storage.create_user(User(
        username="admin",
        email="admin@mechxer.com",
        password=hash_password("admin123"),
        full_name="Admin User",
        role=UserRole.ADMIN,
        is_verified=True,
    ))
    storage.create_user(User(
        username="demo",
        email="demo@example.com",
        password=hash_password("demo123"),
        full_name="Demo User",
        role=UserRole.USER,
        is_verified=True,
    ))

    for entry in DEMO_PRODUCTS:
        product = storage.create_product(Product(**entry["product"], is_active=True))
        for name, price, price_crypto, interval, features, is_popular in entry["plans"]:
            storage.create_subscription_plan(SubscriptionPlan(
                product_id=product.id,
                name=name,
                price=price,
                price_crypto=price_crypto,
                crypto_currency="ETH",
                interval=interval,
                features=features,
                is_popular=is_popular,
            ))

    published_at = utcnow()
    storage.create_blog_post(BlogPost(
        title="Top 5 DevOps Trends in 2023",
        slug="top-5-devops-trends-2023",
        content="Lorem ipsum dolor sit amet, consectetur adipiscing elit. Sed do eiusmod tempor incididunt ut labore et dolore magna aliqua.",
        excerpt="Discover the most important DevOps trends that will shape the industry in 2023.",
        featured_image="https://images.unsplash.com/photo-1555099962-4199c345e5dd",
        author_id=admin.id,
        is_published=True,
        published_at=published_at,
    ))
    storage.create_blog_post(BlogPost(
        title="How to Secure Your Cloud Infrastructure",
        slug="secure-cloud-infrastructure",
        content="Ut enim ad minim veniam, quis nostrud exercitation ullamco laboris nisi ut aliquip ex ea commodo consequat.",
        excerpt="Learn the best practices to keep your cloud infrastructure secure from modern threats.",
        featured_image="https://images.unsplash.com/photo-1597733336794-12d05021d510",
        author_id=admin.id,
        is_published=True,
        published_at=published_at,
    ))

    for name, subject, content in DEMO_EMAIL_TEMPLATES:
        storage.create_email_template(EmailTemplate(name=name, subject=subject, content=content))

    for title, slug, content in DEMO_CONTENT_PAGES:
        storage.create_content_page(ContentPage(title=title, slug=slug, content=content, is_published=True))

    logger.info(
        f"Demo data seeded: {len(storage.users)} users, {len(storage.products)} products, "
        f"{len(storage.subscription_plans)} plans"
    )
