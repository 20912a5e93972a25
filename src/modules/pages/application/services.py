"""Page application services."""

from src.core.domain.slug import is_valid_slug
from src.modules.pages.domain.entities import Page
from src.modules.pages.domain.exceptions import PageNotFoundError
from src.modules.pages.domain.repository import PageRepository


class PageQueryService:
    def __init__(self, page_repository: PageRepository) -> None:
        self.page_repo = page_repository

    async def get_page(self, slug: str) -> Page:
        """Published page by slug."""
        if not is_valid_slug(slug):
            raise PageNotFoundError(slug)
        page = await self.page_repo.get_published_by_slug(slug)
        if page is None:
            raise PageNotFoundError(slug)
        return page
