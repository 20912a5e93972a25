"""Post API schemas."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from src.modules.taxonomy.interfaces.schemas import CategoryRefResponse


class PostStatus(str, Enum):
    """Post status enum for API layer."""

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class AuthorResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    avatar: str | None = None


class PostSummaryResponse(BaseModel):
    """Post list item response."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="文章ID")
    title: str = Field(..., description="标题")
    slug: str = Field(..., description="slug")
    excerpt: str | None = Field(None, description="摘要")
    featured_image: str | None = Field(None, description="封面图")
    category_id: int | None = Field(None, description="分类ID")
    author_id: int | None = Field(None, description="作者ID")
    status: str = Field(..., description="状态")
    views: int = Field(..., description="浏览量")
    published_at: datetime | None = Field(None, description="发布时间")
    created_at: datetime = Field(..., description="创建时间")
    updated_at: datetime = Field(..., description="更新时间")
    category: CategoryRefResponse | None = Field(None, description="分类")
    author: AuthorResponse | None = Field(None, description="作者")


class PostDetailResponse(PostSummaryResponse):
    """Post detail response."""

    content: str | None = Field(None, description="正文")
    meta_title: str | None = Field(None, description="SEO 标题")
    meta_description: str | None = Field(None, description="SEO 描述")
    related: list[PostSummaryResponse] = Field(
        default_factory=list, description="同分类的相关文章"
    )


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str = Field(..., min_length=3, max_length=255, description="标题")
    slug: str | None = Field(
        None,
        min_length=3,
        max_length=255,
        pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$",
        description="slug，缺省时由标题生成",
    )
    excerpt: str | None = Field(None, max_length=1000)
    content: str | None = None
    featured_image: str | None = None
    category_id: int | None = Field(None, description="分类ID")
    status: PostStatus = Field(PostStatus.DRAFT, description="状态")
    published_at: datetime | None = Field(
        None, description="发布时间，发布时缺省为当前时间"
    )
    meta_title: str | None = None
    meta_description: str | None = None

    class Config:
        json_schema_extra = {
            "example": {
                "title": "Five Habits of Effective Teams",
                "category_id": 2,
                "excerpt": "What high-performing teams do differently.",
                "status": "published",
            }
        }


class UpdatePostRequest(BaseModel):
    """Update post request; omitted fields stay unchanged."""

    title: str | None = Field(None, min_length=3, max_length=255)
    slug: str | None = Field(
        None,
        max_length=255,
        pattern=r"^$|^[a-z0-9]+(?:-[a-z0-9]+)*$",
    )
    excerpt: str | None = Field(None, max_length=1000)
    content: str | None = None
    featured_image: str | None = None
    category_id: int | None = None
    status: PostStatus | None = None
    published_at: datetime | None = None
    meta_title: str | None = None
    meta_description: str | None = None

    def to_changes(self) -> dict[str, Any]:
        changes = self.model_dump(exclude_unset=True, mode="json")
        for key in ("title", "status"):
            if key in changes and changes[key] is None:
                changes.pop(key)
        return changes
