"""Contact command handlers."""

from loguru import logger

from src.core.infrastructure.logging import BusinessEvents
from src.modules.contacts.application.commands import (
    DeleteContactCommand,
    SubmitContactCommand,
    UpdateContactStatusCommand,
)
from src.modules.contacts.domain.entities import Contact, ContactStatus
from src.modules.contacts.domain.exceptions import ContactNotFoundError
from src.modules.contacts.domain.repository import ContactRepository


class SubmitContactHandler:
    """Store a contact form submission as an unread message."""

    def __init__(self, contact_repository: ContactRepository):
        self.contact_repository = contact_repository
        self.logger = logger

    async def handle(self, command: SubmitContactCommand) -> Contact:
        contact = Contact(
            **command.model_dump(),
            status=ContactStatus.UNREAD,
        )
        created = await self.contact_repository.create(contact)
        self.logger.info(f"Contact message received: id={created.id}")
        BusinessEvents.contact_received(
            contact_id=created.id,
            ip_address=command.ip_address,
            has_subject=bool(command.subject),
        )
        return created


class UpdateContactStatusHandler:
    """Admin status change (read / replied / archived)."""

    def __init__(self, contact_repository: ContactRepository):
        self.contact_repository = contact_repository
        self.logger = logger

    async def handle(self, command: UpdateContactStatusCommand) -> Contact:
        contact = await self.contact_repository.get_by_id(command.contact_id)
        if not contact:
            raise ContactNotFoundError(command.contact_id)

        previous = contact.status
        contact.change_status(command.status)
        updated = await self.contact_repository.update(contact)
        self.logger.info(
            f"Contact {updated.id} status {previous.value} -> {updated.status.value} "
            f"by {command.actor_id}"
        )
        return updated


class DeleteContactHandler:
    """Remove a message from the inbox."""

    def __init__(self, contact_repository: ContactRepository):
        self.contact_repository = contact_repository
        self.logger = logger

    async def handle(self, command: DeleteContactCommand) -> bool:
        deleted = await self.contact_repository.delete(command.contact_id)
        if not deleted:
            raise ContactNotFoundError(command.contact_id)
        self.logger.info(f"Deleted contact {command.contact_id} by {command.actor_id}")
        BusinessEvents.content_deleted(
            content_type="contact",
            content_id=command.contact_id,
            actor_id=command.actor_id,
        )
        return deleted
