"""Post repository interface."""

from abc import abstractmethod
from datetime import datetime

from src.core.domain.listing import ListQuery
from src.core.domain.repository import BaseRepository
from src.modules.posts.domain.entities import Post
from src.modules.taxonomy.domain.entities import PostCategory
from src.modules.users.domain.entities import User

# (文章, 分类, 作者)，分类和作者可能为空
PostRow = tuple[Post, PostCategory | None, User | None]


class PostRepository(BaseRepository[Post]):
    """Post repository interface."""

    @abstractmethod
    async def list_page(self, query: ListQuery) -> tuple[list[PostRow], int]:
        """One page of posts plus the total matching the same filters."""
        pass

    @abstractmethod
    async def get_published_row_by_slug(
        self, slug: str, now: datetime
    ) -> PostRow | None:
        """Publicly visible post by slug with category and author."""
        pass

    @abstractmethod
    async def get_row_by_id(self, post_id: int) -> PostRow | None:
        pass

    @abstractmethod
    async def list_related(
        self,
        category_id: int,
        exclude_id: int,
        limit: int,
        now: datetime,
    ) -> list[PostRow]:
        """Visible posts in the same category, newest first."""
        pass

    @abstractmethod
    async def exists_by_slug(self, slug: str, exclude_id: int | None = None) -> bool:
        pass

    @abstractmethod
    async def missing_references(self, category_id: int | None = None) -> list[str]:
        """Names of the given reference fields whose rows do not exist."""
        pass

    @abstractmethod
    async def author_exists(self, author_id: int) -> bool:
        pass

    @abstractmethod
    async def increment_views(self, post_id: int) -> int:
        """Atomically add one view and return the stored count."""
        pass
