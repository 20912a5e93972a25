"""Newsletter repository implementation."""

from loguru import logger
from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from src.core.domain.exceptions import EntityNotFoundError
from src.core.domain.listing import ListQuery
from src.core.infrastructure.database.listing import ListColumns, fetch_page
from src.modules.newsletter.domain.entities import NewsletterSubscriber
from src.modules.newsletter.domain.exceptions import AlreadySubscribedError
from src.modules.newsletter.domain.repository import SubscriberRepository
from src.modules.newsletter.infrastructure.mappers import SubscriberMapper
from src.modules.newsletter.infrastructure.models import NewsletterSubscriberModel

SUBSCRIBER_LIST_COLUMNS = ListColumns(
    model=NewsletterSubscriberModel,
    id=col(NewsletterSubscriberModel.id),
    status=col(NewsletterSubscriberModel.status),
    category=None,
    sort={
        "created_at": col(NewsletterSubscriberModel.created_at),
        "email": col(NewsletterSubscriberModel.email),
    },
    search=(
        col(NewsletterSubscriberModel.email),
        col(NewsletterSubscriberModel.name),
    ),
)


class PostgreSQLSubscriberRepository(SubscriberRepository):
    """PostgreSQL newsletter subscriber repository."""

    def __init__(self, session: AsyncSession, mapper: SubscriberMapper):
        self.session = session
        self.mapper = mapper
        self.logger = logger

    async def get_by_email(self, email: str) -> NewsletterSubscriber | None:
        statement = select(NewsletterSubscriberModel).where(
            col(NewsletterSubscriberModel.email) == email
        )
        result = await self.session.execute(statement)
        model = result.scalars().first()
        return self.mapper.to_domain(model) if model else None

    async def list_page(
        self, query: ListQuery
    ) -> tuple[list[NewsletterSubscriber], int]:
        rows, total = await fetch_page(
            self.session,
            select(NewsletterSubscriberModel),
            query,
            SUBSCRIBER_LIST_COLUMNS,
        )
        return [
            self.mapper.to_domain(row.NewsletterSubscriberModel) for row in rows
        ], total

    async def get_by_id(self, subscriber_id: int) -> NewsletterSubscriber | None:
        model = await self.session.get(NewsletterSubscriberModel, subscriber_id)
        return self.mapper.to_domain(model) if model else None

    async def create(self, subscriber: NewsletterSubscriber) -> NewsletterSubscriber:
        model = self.mapper.to_model(subscriber)
        try:
            # 并发订阅同一邮箱时由唯一约束兜底，只回滚到保存点
            async with self.session.begin_nested():
                self.session.add(model)
                await self.session.flush()
        except IntegrityError as e:
            raise AlreadySubscribedError(subscriber.email) from e
        await self.session.refresh(model)
        return self.mapper.to_domain(model)

    async def update(self, subscriber: NewsletterSubscriber) -> NewsletterSubscriber:
        existing = await self.session.get(NewsletterSubscriberModel, subscriber.id)
        if not existing:
            raise EntityNotFoundError("NewsletterSubscriber", subscriber.id)
        self.mapper.apply_to_model(subscriber, existing)
        self.session.add(existing)
        await self.session.flush()
        await self.session.refresh(existing)
        return self.mapper.to_domain(existing)

    async def delete(self, subscriber_id: int) -> bool:
        result = await self.session.execute(
            delete(NewsletterSubscriberModel).where(
                col(NewsletterSubscriberModel.id) == subscriber_id
            )
        )
        return result.rowcount > 0
