"""Contact application services."""

from src.core.domain.listing import ListQuery, total_pages
from src.modules.contacts.application.models import ContactData, ContactListData
from src.modules.contacts.domain.entities import Contact
from src.modules.contacts.domain.repository import ContactRepository


def build_contact_data(contact: Contact) -> ContactData:
    return ContactData.model_validate(contact.model_dump())


class ContactQueryService:
    """Admin inbox queries."""

    def __init__(self, contact_repository: ContactRepository) -> None:
        self.contact_repo = contact_repository

    async def list_contacts(self, query: ListQuery) -> ContactListData:
        contacts, total = await self.contact_repo.list_page(query)
        return ContactListData(
            items=[build_contact_data(c) for c in contacts],
            total=total,
            page=query.page,
            page_size=query.page_size,
            total_pages=total_pages(total, query.page_size),
        )
