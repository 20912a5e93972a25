"""Page domain entities."""

from enum import Enum

from pydantic import Field

from src.core.domain.base_entity import BaseEntity


class PageStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"


class Page(BaseEntity):
    """Page - 静态页面（关于我们、隐私政策等）。"""

    title: str = Field(..., description="标题")
    slug: str = Field(..., description="URL 标识")
    content: str | None = Field(default=None, description="正文")
    template: str = Field(default="default", description="前端模板名")
    status: PageStatus = Field(default=PageStatus.DRAFT)
    meta_title: str | None = Field(default=None)
    meta_description: str | None = Field(default=None)
