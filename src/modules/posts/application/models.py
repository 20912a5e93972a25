"""Post application data models."""

from datetime import datetime

from pydantic import BaseModel

from src.modules.posts.domain.entities import PostStatus
from src.modules.taxonomy.application.models import CategoryRefData


class AuthorData(BaseModel):
    """Author embedded in posts."""

    id: int
    name: str
    avatar: str | None = None


class PostSummaryData(BaseModel):
    """Post list item."""

    id: int
    title: str
    slug: str
    excerpt: str | None = None
    featured_image: str | None = None
    category_id: int | None = None
    author_id: int | None = None
    status: PostStatus
    views: int
    published_at: datetime | None = None
    created_at: datetime
    updated_at: datetime
    category: CategoryRefData | None = None
    author: AuthorData | None = None


class PostDetailData(PostSummaryData):
    """Post detail with content and related posts."""

    content: str | None = None
    meta_title: str | None = None
    meta_description: str | None = None
    related: list[PostSummaryData] = []


class PostListData(BaseModel):
    items: list[PostSummaryData]
    total: int
    page: int
    page_size: int
    total_pages: int
