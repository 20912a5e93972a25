"""Newsletter module application dependencies."""

from typing import NoReturn

from fastapi import Depends

from src.modules.newsletter.application.handlers import (
    DeleteSubscriberHandler,
    SubscribeHandler,
)
from src.modules.newsletter.application.services import SubscriberQueryService
from src.modules.newsletter.domain.repository import SubscriberRepository


def _missing_dependency(name: str) -> NoReturn:
    raise RuntimeError(f"Missing dependency override for {name}")


async def get_subscriber_repository() -> SubscriberRepository:
    _missing_dependency("SubscriberRepository")


async def get_subscribe_handler(
    subscriber_repository: SubscriberRepository = Depends(get_subscriber_repository),
) -> SubscribeHandler:
    return SubscribeHandler(subscriber_repository)


async def get_subscriber_query_service(
    subscriber_repository: SubscriberRepository = Depends(get_subscriber_repository),
) -> SubscriberQueryService:
    return SubscriberQueryService(subscriber_repository)


async def get_delete_subscriber_handler(
    subscriber_repository: SubscriberRepository = Depends(get_subscriber_repository),
) -> DeleteSubscriberHandler:
    return DeleteSubscriberHandler(subscriber_repository)
