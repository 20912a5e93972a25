"""Contact repository interface."""

from abc import abstractmethod

from src.core.domain.listing import ListQuery
from src.core.domain.repository import BaseRepository
from src.modules.contacts.domain.entities import Contact


class ContactRepository(BaseRepository[Contact]):
    """Contact repository interface."""

    @abstractmethod
    async def list_page(self, query: ListQuery) -> tuple[list[Contact], int]:
        pass
