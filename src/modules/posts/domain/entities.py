"""Post domain entities."""

from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import Field

from src.core.domain.base_entity import BaseEntity


class PostStatus(str, Enum):
    """Post status enum."""

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class Post(BaseEntity):
    """Post - 博客文章。"""

    title: str = Field(..., description="标题")
    slug: str = Field(..., description="URL 标识，全局唯一")
    excerpt: str | None = Field(default=None, description="摘要")
    content: str | None = Field(default=None, description="正文")
    featured_image: str | None = Field(default=None, description="封面图")
    category_id: int | None = Field(default=None, description="分类ID")
    author_id: int | None = Field(default=None, description="作者ID")
    status: PostStatus = Field(default=PostStatus.DRAFT, description="状态")
    views: int = Field(default=0, ge=0, description="浏览量")
    published_at: datetime | None = Field(default=None, description="发布时间")
    meta_title: str | None = Field(default=None, description="SEO 标题")
    meta_description: str | None = Field(default=None, description="SEO 描述")

    def stamp_publication(self, now: datetime | None = None) -> None:
        """Fill published_at when a post goes live without one."""
        if self.status == PostStatus.PUBLISHED and self.published_at is None:
            self.published_at = now or datetime.now(UTC)

    def apply_changes(self, changes: dict[str, Any]) -> None:
        """Apply a partial update; views and id are never written here."""
        for key, value in changes.items():
            if key in {"id", "views", "author_id", "created_at", "updated_at"}:
                continue
            setattr(self, key, value)
        self.stamp_publication()
        self._update_timestamp()

    def is_visible(self, now: datetime) -> bool:
        """Published and not scheduled for later."""
        if self.status != PostStatus.PUBLISHED:
            return False
        return self.published_at is None or self.published_at <= now
