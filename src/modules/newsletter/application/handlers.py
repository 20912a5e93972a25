"""Newsletter command handlers."""

import secrets
from datetime import UTC, datetime

from loguru import logger

from src.core.infrastructure.logging import BusinessEvents
from src.modules.newsletter.application.commands import (
    DeleteSubscriberCommand,
    SubscribeCommand,
)
from src.modules.newsletter.domain.entities import (
    NewsletterSubscriber,
    SubscriberStatus,
)
from src.modules.newsletter.domain.exceptions import (
    AlreadySubscribedError,
    SubscriberNotFoundError,
)
from src.modules.newsletter.domain.repository import SubscriberRepository

TOKEN_BYTES = 32


class SubscribeHandler:
    """Subscribe an email, reactivating it if it had left."""

    def __init__(self, subscriber_repository: SubscriberRepository):
        self.subscriber_repository = subscriber_repository
        self.logger = logger

    async def handle(self, command: SubscribeCommand) -> NewsletterSubscriber:
        email = command.email.strip().lower()
        now = datetime.now(UTC)

        existing = await self.subscriber_repository.get_by_email(email)
        if existing is not None:
            if existing.is_active:
                raise AlreadySubscribedError(email)
            existing.reactivate(name=command.name, now=now)
            subscriber = await self.subscriber_repository.update(existing)
            reactivated = True
        else:
            subscriber = await self.subscriber_repository.create(
                NewsletterSubscriber(
                    email=email,
                    name=command.name,
                    status=SubscriberStatus.ACTIVE,
                    token=secrets.token_urlsafe(TOKEN_BYTES),
                    subscribed_at=now,
                )
            )
            reactivated = False

        self.logger.info(
            f"Newsletter subscription: id={subscriber.id} reactivated={reactivated}"
        )
        BusinessEvents.newsletter_subscribed(
            subscriber_id=subscriber.id, reactivated=reactivated
        )
        return subscriber


class DeleteSubscriberHandler:
    """Remove a subscriber from the list."""

    def __init__(self, subscriber_repository: SubscriberRepository):
        self.subscriber_repository = subscriber_repository
        self.logger = logger

    async def handle(self, command: DeleteSubscriberCommand) -> bool:
        deleted = await self.subscriber_repository.delete(command.subscriber_id)
        if not deleted:
            raise SubscriberNotFoundError(command.subscriber_id)
        self.logger.info(
            f"Deleted newsletter subscriber {command.subscriber_id} by {command.actor_id}"
        )
        BusinessEvents.content_deleted(
            content_type="newsletter_subscriber",
            content_id=command.subscriber_id,
            actor_id=command.actor_id,
        )
        return deleted
