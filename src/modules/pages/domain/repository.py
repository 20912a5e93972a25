"""Page repository interface."""

from abc import ABC, abstractmethod

from src.modules.pages.domain.entities import Page


class PageRepository(ABC):
    """Page repository interface (read only)."""

    @abstractmethod
    async def get_published_by_slug(self, slug: str) -> Page | None:
        pass
