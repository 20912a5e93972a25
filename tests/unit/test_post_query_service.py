"""PostQueryService 与文章命令处理器单元测试。"""

from datetime import timedelta

import pytest

from src.core.domain.listing import RawListParams, Visibility, normalize_list_params
from src.modules.posts.application.commands import (
    CreatePostCommand,
    DeletePostCommand,
    UpdatePostCommand,
)
from src.modules.posts.application.handlers import (
    CreatePostHandler,
    DeletePostHandler,
    UpdatePostHandler,
)
from src.modules.posts.application.services import PostQueryService
from src.modules.posts.domain.entities import PostStatus
from src.modules.posts.domain.exceptions import PostNotFoundError, PostSlugExistsError
from src.modules.posts.domain.listing import POST_LIST_POLICY
from src.modules.taxonomy.domain.entities import PostCategory
from src.modules.users.domain.entities import User
from tests.unit.fakes import BASE_TIME, _FakePostRepo, make_post

pytestmark = pytest.mark.anyio

NOW = BASE_TIME + timedelta(days=30)


@pytest.fixture
def post_repo() -> _FakePostRepo:
    posts = [
        make_post(1, category_id=1, author_id=1, excerpt="Team habits"),
        make_post(2, category_id=1, published_at=BASE_TIME.replace(day=10)),
        make_post(3, category_id=1, published_at=BASE_TIME.replace(day=10)),
        make_post(4, category_id=1, published_at=None),
        make_post(5, category_id=1, published_at=NOW + timedelta(days=1)),  # 定时发布
        make_post(6, category_id=1, status=PostStatus.DRAFT),
        make_post(7, category_id=2),
        make_post(8, category_id=1, published_at=BASE_TIME.replace(day=20)),
    ]
    return _FakePostRepo(
        posts,
        [PostCategory(id=1, name="Tips", slug="tips")],
        [User(id=1, name="Editor", email="editor@example.com", avatar="a.png")],
    )


@pytest.fixture
def service(post_repo) -> PostQueryService:
    return PostQueryService(post_repo, related_limit=3)


class TestListPosts:
    async def test_scheduled_and_drafts_hidden(self, service):
        query = normalize_list_params(RawListParams(), POST_LIST_POLICY, now=NOW)

        result = await service.list_posts(query)

        ids = [item.id for item in result.items]
        assert result.total == 6
        assert 5 not in ids
        assert 6 not in ids

    async def test_default_order_newest_first_nulls_last(self, service):
        query = normalize_list_params(RawListParams(), POST_LIST_POLICY, now=NOW)

        result = await service.list_posts(query)

        # 2 和 3 发布时间相同，按 id 升序；没有发布时间的排在最后
        assert [item.id for item in result.items] == [8, 2, 3, 7, 1, 4]

    async def test_author_embedded(self, service):
        query = normalize_list_params(
            RawListParams(search="habits"), POST_LIST_POLICY, now=NOW
        )

        result = await service.list_posts(query)

        assert len(result.items) == 1
        author = result.items[0].author
        assert author.name == "Editor"
        assert author.avatar == "a.png"
        assert result.items[0].category.slug == "tips"

    async def test_admin_sees_scheduled(self, service):
        query = normalize_list_params(
            RawListParams(), POST_LIST_POLICY, Visibility.ANY, now=NOW
        )

        result = await service.list_posts(query)

        assert result.total == 8


class TestGetPost:
    async def test_related_posts(self, service):
        detail = await service.get_post("post-8", now=NOW)

        assert detail.views == 1
        assert [r.id for r in detail.related] == [2, 3, 1]

    async def test_related_excludes_self_and_hidden(self, service):
        detail = await service.get_post("post-4", now=NOW)

        related_ids = [r.id for r in detail.related]
        assert 4 not in related_ids
        assert 5 not in related_ids
        assert 6 not in related_ids
        assert 7 not in related_ids

    async def test_no_category_no_related(self, post_repo):
        post_repo.items[7].category_id = None
        service = PostQueryService(post_repo)

        detail = await service.get_post("post-7", now=NOW)

        assert detail.related == []

    @pytest.mark.parametrize("slug", ["post-5", "post-6", "missing"])
    async def test_not_visible(self, service, slug):
        with pytest.raises(PostNotFoundError):
            await service.get_post(slug, now=NOW)

    async def test_scheduled_post_visible_once_due(self, service):
        detail = await service.get_post("post-5", now=NOW + timedelta(days=2))
        assert detail.id == 5


class TestPostHandlers:
    async def test_create_sets_author_and_publication_time(self, post_repo):
        handler = CreatePostHandler(post_repo)

        post = await handler.handle(
            CreatePostCommand(
                actor_id="1",
                author_id=1,
                title="Five Habits of Effective Teams",
                status=PostStatus.PUBLISHED,
            )
        )

        assert post.slug == "five-habits-of-effective-teams"
        assert post.author_id == 1
        assert post.published_at is not None

    async def test_draft_has_no_publication_time(self, post_repo):
        handler = CreatePostHandler(post_repo)

        post = await handler.handle(CreatePostCommand(actor_id="1", title="Draft idea"))

        assert post.published_at is None

    async def test_create_duplicate_slug(self, post_repo):
        handler = CreatePostHandler(post_repo)

        with pytest.raises(PostSlugExistsError):
            await handler.handle(
                CreatePostCommand(actor_id="1", title="Anything", slug="post-1")
            )

    async def test_publishing_a_draft_stamps_time(self, post_repo):
        handler = UpdatePostHandler(post_repo)

        updated = await handler.handle(
            UpdatePostCommand(
                actor_id="1",
                post_id=6,
                changes={"status": "published", "author_id": 99},
            )
        )

        assert updated.status == PostStatus.PUBLISHED
        assert updated.published_at is not None
        assert updated.author_id is None

    async def test_delete(self, post_repo):
        handler = DeletePostHandler(post_repo)

        assert await handler.handle(DeletePostCommand(actor_id="1", post_id=1))
        with pytest.raises(PostNotFoundError):
            await handler.handle(DeletePostCommand(actor_id="1", post_id=1))
