"""Contact repository implementation."""

from loguru import logger
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from src.core.domain.exceptions import EntityNotFoundError
from src.core.domain.listing import ListQuery
from src.core.infrastructure.database.listing import ListColumns, fetch_page
from src.modules.contacts.domain.entities import Contact
from src.modules.contacts.domain.repository import ContactRepository
from src.modules.contacts.infrastructure.mappers import ContactMapper
from src.modules.contacts.infrastructure.models import ContactModel

CONTACT_LIST_COLUMNS = ListColumns(
    model=ContactModel,
    id=col(ContactModel.id),
    status=col(ContactModel.status),
    category=None,
    sort={"created_at": col(ContactModel.created_at)},
    search=(
        col(ContactModel.name),
        col(ContactModel.email),
        col(ContactModel.subject),
        col(ContactModel.message),
    ),
)


class PostgreSQLContactRepository(ContactRepository):
    """PostgreSQL contact repository implementation."""

    def __init__(self, session: AsyncSession, mapper: ContactMapper):
        self.session = session
        self.mapper = mapper
        self.logger = logger

    async def list_page(self, query: ListQuery) -> tuple[list[Contact], int]:
        rows, total = await fetch_page(
            self.session, select(ContactModel), query, CONTACT_LIST_COLUMNS
        )
        return [self.mapper.to_domain(row.ContactModel) for row in rows], total

    async def get_by_id(self, contact_id: int) -> Contact | None:
        model = await self.session.get(ContactModel, contact_id)
        return self.mapper.to_domain(model) if model else None

    async def create(self, contact: Contact) -> Contact:
        model = self.mapper.to_model(contact)
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self.mapper.to_domain(model)

    async def update(self, contact: Contact) -> Contact:
        existing = await self.session.get(ContactModel, contact.id)
        if not existing:
            raise EntityNotFoundError("Contact", contact.id)
        self.mapper.apply_to_model(contact, existing)
        self.session.add(existing)
        await self.session.flush()
        await self.session.refresh(existing)
        return self.mapper.to_domain(existing)

    async def delete(self, contact_id: int) -> bool:
        result = await self.session.execute(
            delete(ContactModel).where(col(ContactModel.id) == contact_id)
        )
        return result.rowcount > 0
