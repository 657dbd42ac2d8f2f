"""
Blog posts, content pages and email templates
"""
import logging
from typing import Optional

from shared.exceptions import ConflictError, NotFoundError
from shared.models import BlogPost, ContentPage, EmailTemplate, utcnow
from shared.storage import MemStorage

logger = logging.getLogger(__name__)


class ContentService:
    def __init__(self, storage: MemStorage):
        self.storage = storage

    # ---------- Blog posts ----------
    def get_blog_post(self, post_id: int) -> BlogPost:
        post = self.storage.get_blog_post(post_id)
        if not post:
            raise NotFoundError("Blog post not found")
        return post

    def get_blog_post_by_slug(self, slug: str) -> BlogPost:
        post = self.storage.get_blog_post_by_slug(slug)
        if not post:
            raise NotFoundError("Blog post not found")
        return post

    def create_blog_post(self, data: dict, author_id: int) -> BlogPost:
        self._ensure_post_slug_free(data["slug"])

        data = dict(data, author_id=author_id)
        if data.get("is_published"):
            data["published_at"] = data.get("published_at") or utcnow()
        else:
            data["published_at"] = None

        post = self.storage.create_blog_post(BlogPost(**data))
        logger.info(f"Blog post {post.id} created by user {author_id}: {post.slug}")
        return post

    def update_blog_post(self, post_id: int, updates: dict) -> BlogPost:
        post = self.get_blog_post(post_id)

        if "slug" in updates and updates["slug"] != post.slug:
            self._ensure_post_slug_free(updates["slug"])

        # published_at follows the publish flag
        if "is_published" in updates:
            if updates["is_published"] and post.published_at is None:
                updates = dict(updates, published_at=updates.get("published_at") or utcnow())
            elif not updates["is_published"]:
                updates = dict(updates, published_at=None)

        return self.storage.update_blog_post(post_id, updates)

    def delete_blog_post(self, post_id: int) -> None:
        if not self.storage.delete_blog_post(post_id):
            raise NotFoundError("Blog post not found")
        logger.info(f"Blog post {post_id} deleted")

    def _ensure_post_slug_free(self, slug: str):
        if self.storage.get_blog_post_by_slug(slug):
            raise ConflictError("Blog post with this slug already exists")

    # ---------- Content pages ----------
    def get_content_page(self, page_id: int) -> ContentPage:
        page = self.storage.get_content_page(page_id)
        if not page:
            raise NotFoundError("Content page not found")
        return page

    def get_content_page_by_slug(self, slug: str) -> ContentPage:
        page = self.storage.get_content_page_by_slug(slug)
        if not page:
            raise NotFoundError("Content page not found")
        return page

    def create_content_page(self, data: dict) -> ContentPage:
        if self.storage.get_content_page_by_slug(data["slug"]):
            raise ConflictError("Content page with this slug already exists")
        page = self.storage.create_content_page(ContentPage(**data))
        logger.info(f"Content page {page.id} created: {page.slug}")
        return page

    def update_content_page(self, page_id: int, updates: dict) -> ContentPage:
        page = self.get_content_page(page_id)
        if "slug" in updates and updates["slug"] != page.slug:
            if self.storage.get_content_page_by_slug(updates["slug"]):
                raise ConflictError("Content page with this slug already exists")
        return self.storage.update_content_page(page_id, updates)

    def delete_content_page(self, page_id: int) -> None:
        if not self.storage.delete_content_page(page_id):
            raise NotFoundError("Content page not found")
        logger.info(f"Content page {page_id} deleted")

    # ---------- Email templates ----------
    def get_email_template(self, template_id: int) -> EmailTemplate:
        template = self.storage.get_email_template(template_id)
        if not template:
            raise NotFoundError("Email template not found")
        return template

    def create_email_template(self, data: dict) -> EmailTemplate:
        if self.storage.get_email_template_by_name(data["name"]):
            raise ConflictError("Email template with this name already exists")
        return self.storage.create_email_template(EmailTemplate(**data))

    def update_email_template(self, template_id: int, updates: dict) -> EmailTemplate:
        template = self.get_email_template(template_id)
        name: Optional[str] = updates.get("name")
        if name and name != template.name and self.storage.get_email_template_by_name(name):
            raise ConflictError("Email template with this name already exists")
        return self.storage.update_email_template(template_id, updates)

    def delete_email_template(self, template_id: int) -> None:
        if not self.storage.delete_email_template(template_id):
            raise NotFoundError("Email template not found")
