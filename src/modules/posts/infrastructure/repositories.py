"""Post repository implementation."""

from datetime import datetime

from loguru import logger
from sqlalchemy import ColumnElement, delete, or_, update
from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from src.core.domain.exceptions import EntityNotFoundError
from src.core.domain.listing import PUBLISHED_STATUS, ListQuery
from src.core.infrastructure.database.errors import flush_in_savepoint
from src.core.infrastructure.database.listing import ListColumns, fetch_page
from src.modules.posts.domain.entities import Post
from src.modules.posts.domain.exceptions import PostSlugExistsError
from src.modules.posts.domain.repository import PostRepository, PostRow
from src.modules.posts.infrastructure.mappers import PostMapper
from src.modules.posts.infrastructure.models import PostModel
from src.modules.taxonomy.infrastructure.mappers import PostCategoryMapper
from src.modules.taxonomy.infrastructure.models import PostCategoryModel
from src.modules.users.infrastructure.mappers import UserMapper
from src.modules.users.infrastructure.models import UserModel

POST_LIST_COLUMNS = ListColumns(
    model=PostModel,
    id=col(PostModel.id),
    status=col(PostModel.status),
    category=col(PostModel.category_id),
    sort={
        "id": col(PostModel.id),
        "title": col(PostModel.title),
        "published_at": col(PostModel.published_at),
        "created_at": col(PostModel.created_at),
        "updated_at": col(PostModel.updated_at),
        "views": col(PostModel.views),
    },
    search=(
        col(PostModel.title),
        col(PostModel.excerpt),
        col(PostModel.content),
    ),
    published_at=col(PostModel.published_at),
)


def _visible_conditions(now: datetime) -> list[ColumnElement[bool]]:
    return [
        col(PostModel.status) == PUBLISHED_STATUS,
        or_(
            col(PostModel.published_at).is_(None),
            col(PostModel.published_at) <= now,
        ),
    ]


class PostgreSQLPostRepository(PostRepository):
    """PostgreSQL post repository implementation."""

    def __init__(
        self,
        session: AsyncSession,
        mapper: PostMapper,
        category_mapper: PostCategoryMapper | None = None,
        user_mapper: UserMapper | None = None,
    ):
        self.session = session
        self.mapper = mapper
        self.category_mapper = category_mapper or PostCategoryMapper()
        self.user_mapper = user_mapper or UserMapper()
        self.logger = logger

    def _joined_select(self):
        return (
            select(PostModel, PostCategoryModel, UserModel)
            .outerjoin(
                PostCategoryModel,
                col(PostModel.category_id) == col(PostCategoryModel.id),
            )
            .outerjoin(UserModel, col(PostModel.author_id) == col(UserModel.id))
        )

    def _to_row(self, row: Row) -> PostRow:
        return (
            self.mapper.to_domain(row.PostModel),
            self.category_mapper.to_domain_or_none(row.PostCategoryModel),
            self.user_mapper.to_domain_or_none(row.UserModel),
        )

    async def list_page(self, query: ListQuery) -> tuple[list[PostRow], int]:
        rows, total = await fetch_page(
            self.session, self._joined_select(), query, POST_LIST_COLUMNS
        )
        return [self._to_row(row) for row in rows], total

    async def get_published_row_by_slug(
        self, slug: str, now: datetime
    ) -> PostRow | None:
        statement = self._joined_select().where(
            col(PostModel.slug) == slug, *_visible_conditions(now)
        )
        result = await self.session.execute(statement)
        row = result.first()
        return self._to_row(row) if row else None

    async def get_row_by_id(self, post_id: int) -> PostRow | None:
        statement = self._joined_select().where(col(PostModel.id) == post_id)
        result = await self.session.execute(statement)
        row = result.first()
        return self._to_row(row) if row else None

    async def list_related(
        self,
        category_id: int,
        exclude_id: int,
        limit: int,
        now: datetime,
    ) -> list[PostRow]:
        statement = (
            self._joined_select()
            .where(
                col(PostModel.category_id) == category_id,
                col(PostModel.id) != exclude_id,
                *_visible_conditions(now),
            )
            .order_by(
                col(PostModel.published_at).desc().nullslast(),
                col(PostModel.id).asc(),
            )
            .limit(limit)
        )
        result = await self.session.execute(statement)
        return [self._to_row(row) for row in result.all()]

    async def get_by_id(self, post_id: int) -> Post | None:
        model = await self.session.get(PostModel, post_id)
        return self.mapper.to_domain(model) if model else None

    async def exists_by_slug(self, slug: str, exclude_id: int | None = None) -> bool:
        statement = select(PostModel.id).where(col(PostModel.slug) == slug)
        if exclude_id is not None:
            statement = statement.where(col(PostModel.id) != exclude_id)
        result = await self.session.execute(statement)
        return result.first() is not None

    async def missing_references(self, category_id: int | None = None) -> list[str]:
        if category_id is not None and not await self.session.get(
            PostCategoryModel, category_id
        ):
            return ["category_id"]
        return []

    async def author_exists(self, author_id: int) -> bool:
        return await self.session.get(UserModel, author_id) is not None

    async def increment_views(self, post_id: int) -> int:
        statement = (
            update(PostModel)
            .where(col(PostModel.id) == post_id)
            .values(views=col(PostModel.views) + 1)
            .returning(col(PostModel.views))
        )
        result = await self.session.execute(statement)
        views = result.scalar_one_or_none()
        if views is None:
            raise EntityNotFoundError("Post", post_id)
        return views

    async def create(self, post: Post) -> Post:
        model = self.mapper.to_model(post)
        await flush_in_savepoint(
            self.session, model, lambda: PostSlugExistsError(post.slug)
        )
        await self.session.refresh(model)
        return self.mapper.to_domain(model)

    async def update(self, post: Post) -> Post:
        existing = await self.session.get(PostModel, post.id)
        if not existing:
            raise EntityNotFoundError("Post", post.id)

        stored_views = existing.views
        self.mapper.apply_to_model(post, existing)
        existing.views = stored_views

        await flush_in_savepoint(
            self.session, existing, lambda: PostSlugExistsError(post.slug)
        )
        await self.session.refresh(existing)
        return self.mapper.to_domain(existing)

    async def delete(self, post_id: int) -> bool:
        result = await self.session.execute(
            delete(PostModel).where(col(PostModel.id) == post_id)
        )
        return result.rowcount > 0
