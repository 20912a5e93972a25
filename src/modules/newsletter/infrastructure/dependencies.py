"""Newsletter module dependencies."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.infrastructure.database.session import get_db_session
from src.modules.newsletter.infrastructure.mappers import SubscriberMapper
from src.modules.newsletter.infrastructure.repositories import (
    PostgreSQLSubscriberRepository,
)


def get_subscriber_mapper() -> SubscriberMapper:
    return SubscriberMapper()


async def get_subscriber_repository(
    session: AsyncSession = Depends(get_db_session),
    mapper: SubscriberMapper = Depends(get_subscriber_mapper),
) -> PostgreSQLSubscriberRepository:
    return PostgreSQLSubscriberRepository(session, mapper)
