"""Post application services."""

from datetime import UTC, datetime

from loguru import logger

from src.core.domain.listing import ListQuery, total_pages
from src.core.domain.slug import is_valid_slug
from src.core.infrastructure.logging import BusinessEvents
from src.modules.posts.application.models import (
    AuthorData,
    PostDetailData,
    PostListData,
    PostSummaryData,
)
from src.modules.posts.domain.exceptions import PostNotFoundError
from src.modules.posts.domain.repository import PostRepository, PostRow
from src.modules.taxonomy.application.services import build_category_ref
from src.modules.users.domain.entities import User


def _build_author(author: User | None) -> AuthorData | None:
    if author is None or author.id is None:
        return None
    return AuthorData(id=author.id, name=author.name, avatar=author.avatar)


class PostQueryService:
    """Post query service for list/detail views."""

    def __init__(
        self,
        post_repository: PostRepository,
        related_limit: int = 3,
    ) -> None:
        self.post_repo = post_repository
        self.related_limit = related_limit
        self.logger = logger

    @staticmethod
    def build_summary_data(row: PostRow) -> PostSummaryData:
        post, category, author = row
        return PostSummaryData(
            id=post.id,
            title=post.title,
            slug=post.slug,
            excerpt=post.excerpt,
            featured_image=post.featured_image,
            category_id=post.category_id,
            author_id=post.author_id,
            status=post.status,
            views=post.views,
            published_at=post.published_at,
            created_at=post.created_at,
            updated_at=post.updated_at,
            category=build_category_ref(category),
            author=_build_author(author),
        )

    @staticmethod
    def build_detail_data(
        row: PostRow,
        related: list[PostRow] | None = None,
        views: int | None = None,
    ) -> PostDetailData:
        post = row[0]
        summary = PostQueryService.build_summary_data(row)
        return PostDetailData(
            **summary.model_dump(exclude={"views", "category", "author"}),
            category=summary.category,
            author=summary.author,
            views=post.views if views is None else views,
            content=post.content,
            meta_title=post.meta_title,
            meta_description=post.meta_description,
            related=[
                PostQueryService.build_summary_data(item) for item in related or []
            ],
        )

    async def list_posts(self, query: ListQuery) -> PostListData:
        """List posts matching the normalized query."""
        rows, total = await self.post_repo.list_page(query)
        return PostListData(
            items=[self.build_summary_data(row) for row in rows],
            total=total,
            page=query.page,
            page_size=query.page_size,
            total_pages=total_pages(total, query.page_size),
        )

    async def get_post(self, slug: str, now: datetime | None = None) -> PostDetailData:
        """Get a publicly visible post by slug, with related posts.

        未发布或 published_at 晚于当前时间的文章一律视为不存在。
        """
        if not is_valid_slug(slug):
            raise PostNotFoundError(slug=slug)

        now = now or datetime.now(UTC)
        row = await self.post_repo.get_published_row_by_slug(slug, now)
        if row is None:
            raise PostNotFoundError(slug=slug)

        post = row[0]
        related: list[PostRow] = []
        if post.category_id is not None and self.related_limit > 0:
            related = await self.post_repo.list_related(
                category_id=post.category_id,
                exclude_id=post.id,
                limit=self.related_limit,
                now=now,
            )

        views = await self.post_repo.increment_views(post.id)
        BusinessEvents.content_viewed(
            content_type="post", content_id=post.id, views=views
        )
        return self.build_detail_data(row, related, views=views)

    async def get_post_by_id(self, post_id: int) -> PostDetailData:
        """Admin lookup by id, any status, without counting a view."""
        row = await self.post_repo.get_row_by_id(post_id)
        if row is None:
            raise PostNotFoundError(post_id=post_id)
        return self.build_detail_data(row)
