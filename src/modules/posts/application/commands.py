"""Post application commands."""

from datetime import datetime

from pydantic import BaseModel

from src.modules.posts.domain.entities import PostStatus


class CreatePostCommand(BaseModel):
    """Create a new post; author is the acting admin."""

    actor_id: str
    author_id: int | None = None
    title: str
    slug: str | None = None
    excerpt: str | None = None
    content: str | None = None
    featured_image: str | None = None
    category_id: int | None = None
    status: PostStatus = PostStatus.DRAFT
    published_at: datetime | None = None
    meta_title: str | None = None
    meta_description: str | None = None


class UpdatePostCommand(BaseModel):
    actor_id: str
    post_id: int
    changes: dict


class DeletePostCommand(BaseModel):
    actor_id: str
    post_id: int
