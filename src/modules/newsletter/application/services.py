"""Newsletter application services."""

from src.core.domain.listing import ListQuery, total_pages
from src.modules.newsletter.application.models import (
    SubscriberData,
    SubscriberListData,
)
from src.modules.newsletter.domain.entities import NewsletterSubscriber
from src.modules.newsletter.domain.repository import SubscriberRepository


def build_subscriber_data(subscriber: NewsletterSubscriber) -> SubscriberData:
    return SubscriberData.model_validate(subscriber.model_dump(exclude={"token"}))


class SubscriberQueryService:
    """Admin subscriber list."""

    def __init__(self, subscriber_repository: SubscriberRepository) -> None:
        self.subscriber_repo = subscriber_repository

    async def list_subscribers(self, query: ListQuery) -> SubscriberListData:
        subscribers, total = await self.subscriber_repo.list_page(query)
        return SubscriberListData(
            items=[build_subscriber_data(s) for s in subscribers],
            total=total,
            page=query.page,
            page_size=query.page_size,
            total_pages=total_pages(total, query.page_size),
        )
