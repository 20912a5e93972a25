"""PostgreSQL 仓储集成测试。"""

import os
from collections.abc import AsyncGenerator
from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel

from src.core.domain.listing import RawListParams, normalize_list_params
from src.modules.contacts.infrastructure.models import ContactModel  # noqa: F401
from src.modules.newsletter.domain.entities import NewsletterSubscriber
from src.modules.newsletter.domain.exceptions import AlreadySubscribedError
from src.modules.newsletter.infrastructure.mappers import SubscriberMapper
from src.modules.newsletter.infrastructure.repositories import (
    PostgreSQLSubscriberRepository,
)
from src.modules.pages.infrastructure.models import PageModel  # noqa: F401
from src.modules.posts.domain.entities import Post, PostStatus
from src.modules.posts.domain.listing import POST_LIST_POLICY
from src.modules.posts.infrastructure.mappers import PostMapper
from src.modules.posts.infrastructure.repositories import PostgreSQLPostRepository
from src.modules.programs.domain.entities import Program, ProgramStatus
from src.modules.programs.domain.listing import PROGRAM_LIST_POLICY
from src.modules.programs.infrastructure.mappers import ProgramMapper
from src.modules.programs.infrastructure.repositories import (
    PostgreSQLProgramRepository,
)
from src.modules.taxonomy.infrastructure.models import PostCategoryModel
from src.modules.users.infrastructure.models import UserModel

pytestmark = [pytest.mark.integration, pytest.mark.anyio]

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL")

if not TEST_DATABASE_URL:
    pytest.skip("TEST_DATABASE_URL is not set", allow_module_level=True)

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """建表后提供一个事务会话，测试结束回滚并删表。"""
    engine = create_async_engine(TEST_DATABASE_URL, pool_pre_ping=True)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        await session.begin()
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


async def _seed_programs(repo: PostgreSQLProgramRepository, count: int) -> None:
    for i in range(1, count + 1):
        await repo.create(
            Program(
                title=f"Program {i:02d}",
                slug=f"program-{i}",
                price=Decimal(100 * i),
                status=ProgramStatus.DRAFT if i % 5 == 0 else ProgramStatus.PUBLISHED,
            )
        )


class TestProgramRepository:
    async def test_window_count_matches_filter(self, db_session):
        repo = PostgreSQLProgramRepository(db_session, ProgramMapper())
        await _seed_programs(repo, 12)
        query = normalize_list_params(
            RawListParams(limit="4", sort_by="title", sort_order="asc"),
            PROGRAM_LIST_POLICY,
        )

        rows, total = await repo.list_page(query)

        assert total == 10
        assert [row[0].title for row in rows] == [
            "Program 01",
            "Program 02",
            "Program 03",
            "Program 04",
        ]
        assert all(row[1] is None and row[2] is None for row in rows)

    async def test_page_past_end_falls_back_to_count(self, db_session):
        repo = PostgreSQLProgramRepository(db_session, ProgramMapper())
        await _seed_programs(repo, 12)
        query = normalize_list_params(
            RawListParams(page="9", limit="4"), PROGRAM_LIST_POLICY
        )

        rows, total = await repo.list_page(query)

        assert rows == []
        assert total == 10

    async def test_search_escapes_wildcards(self, db_session):
        repo = PostgreSQLProgramRepository(db_session, ProgramMapper())
        await _seed_programs(repo, 3)
        query = normalize_list_params(RawListParams(search="%"), PROGRAM_LIST_POLICY)

        _, total = await repo.list_page(query)

        assert total == 0

    async def test_increment_views_is_atomic_update(self, db_session):
        repo = PostgreSQLProgramRepository(db_session, ProgramMapper())
        await _seed_programs(repo, 1)
        program = await repo.get_by_id(1)

        assert await repo.increment_views(program.id) == 1
        assert await repo.increment_views(program.id) == 2

        # 用旧快照更新其他字段不会覆盖浏览量
        program.title = "Renamed"
        updated = await repo.update(program)
        assert updated.views == 2


class TestPostRepository:
    async def _seed(self, session: AsyncSession) -> PostgreSQLPostRepository:
        session.add(PostCategoryModel(id=1, name="Tips", slug="tips"))
        session.add(UserModel(id=1, name="Editor", email="editor@example.com"))
        await session.flush()

        repo = PostgreSQLPostRepository(session, PostMapper())
        specs = [
            ("older", NOW - timedelta(days=5)),
            ("newer", NOW - timedelta(days=1)),
            ("same-a", NOW - timedelta(days=2)),
            ("same-b", NOW - timedelta(days=2)),
            ("scheduled", NOW + timedelta(days=1)),
            ("undated", None),
        ]
        for slug, published_at in specs:
            await repo.create(
                Post(
                    title=slug.title(),
                    slug=slug,
                    category_id=1,
                    author_id=1,
                    status=PostStatus.PUBLISHED,
                    published_at=published_at,
                )
            )
        return repo

    async def test_public_list_is_time_gated(self, db_session):
        repo = await self._seed(db_session)
        query = normalize_list_params(RawListParams(), POST_LIST_POLICY, now=NOW)

        rows, total = await repo.list_page(query)

        assert total == 5
        assert [row[0].slug for row in rows] == [
            "newer",
            "same-a",
            "same-b",
            "older",
            "undated",
        ]
        assert rows[0][2].name == "Editor"

    async def test_scheduled_post_hidden_by_slug(self, db_session):
        repo = await self._seed(db_session)

        assert await repo.get_published_row_by_slug("scheduled", NOW) is None
        assert await repo.get_published_row_by_slug("newer", NOW) is not None

    async def test_related_posts(self, db_session):
        repo = await self._seed(db_session)
        newer = await repo.get_published_row_by_slug("newer", NOW)

        related = await repo.list_related(1, newer[0].id, 3, NOW)

        assert [row[0].slug for row in related] == ["same-a", "same-b", "older"]


class TestSubscriberRepository:
    async def test_duplicate_email_maps_to_domain_error(self, db_session):
        repo = PostgreSQLSubscriberRepository(db_session, SubscriberMapper())
        await repo.create(NewsletterSubscriber(email="a@example.com", token="t1"))

        with pytest.raises(AlreadySubscribedError):
            await repo.create(NewsletterSubscriber(email="a@example.com", token="t2"))

        # 保存点回滚后会话仍可使用
        assert await repo.get_by_email("a@example.com") is not None
