"""Contact module dependencies."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.infrastructure.database.session import get_db_session
from src.modules.contacts.infrastructure.mappers import ContactMapper
from src.modules.contacts.infrastructure.repositories import (
    PostgreSQLContactRepository,
)


def get_contact_mapper() -> ContactMapper:
    return ContactMapper()


async def get_contact_repository(
    session: AsyncSession = Depends(get_db_session),
    mapper: ContactMapper = Depends(get_contact_mapper),
) -> PostgreSQLContactRepository:
    return PostgreSQLContactRepository(session, mapper)
