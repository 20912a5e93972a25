"""Taxonomy repository interfaces."""

from abc import ABC, abstractmethod

from src.modules.taxonomy.domain.entities import PostCategory, ProgramCategory


class ProgramCategoryRepository(ABC):
    """Program category repository interface."""

    @abstractmethod
    async def list_ordered(self) -> list[ProgramCategory]:
        """All categories by display_order, then name."""
        pass


class PostCategoryRepository(ABC):
    """Post category repository interface."""

    @abstractmethod
    async def list_ordered(self) -> list[PostCategory]:
        """All categories by name."""
        pass
