"""Newsletter repository interface."""

from abc import abstractmethod

from src.core.domain.listing import ListQuery
from src.core.domain.repository import BaseRepository
from src.modules.newsletter.domain.entities import NewsletterSubscriber


class SubscriberRepository(BaseRepository[NewsletterSubscriber]):
    @abstractmethod
    async def get_by_email(self, email: str) -> NewsletterSubscriber | None:
        """Lookup by normalized (lower-case) email."""
        pass

    @abstractmethod
    async def list_page(
        self, query: ListQuery
    ) -> tuple[list[NewsletterSubscriber], int]:
        pass
