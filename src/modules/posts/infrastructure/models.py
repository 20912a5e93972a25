"""Post database models."""

from datetime import datetime

from sqlalchemy import DateTime, Enum, Text
from sqlmodel import Field

from src.core.infrastructure.database.base_model import BaseModel
from src.modules.posts.domain.entities import PostStatus


class PostModel(BaseModel, table=True):
    """Post database model."""

    __tablename__ = "posts"

    title: str = Field(nullable=False, max_length=255)
    slug: str = Field(nullable=False, unique=True, index=True, max_length=255)
    excerpt: str | None = Field(default=None, sa_type=Text, nullable=True)
    content: str | None = Field(default=None, sa_type=Text, nullable=True)
    featured_image: str | None = Field(default=None, nullable=True, max_length=500)
    category_id: int | None = Field(
        default=None, foreign_key="post_categories.id", nullable=True, index=True
    )
    author_id: int | None = Field(
        default=None, foreign_key="users.id", nullable=True, index=True
    )
    status: PostStatus = Field(
        default=PostStatus.DRAFT,
        sa_type=Enum(
            PostStatus,
            name="poststatus",
            values_callable=lambda e: [i.value for i in e],
            create_constraint=False,
        ),
        nullable=False,
        index=True,
    )
    views: int = Field(default=0, nullable=False)
    published_at: datetime | None = Field(
        default=None, sa_type=DateTime(timezone=True), nullable=True, index=True
    )
    meta_title: str | None = Field(default=None, nullable=True, max_length=255)
    meta_description: str | None = Field(default=None, sa_type=Text, nullable=True)
