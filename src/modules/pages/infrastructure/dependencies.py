"""Page module dependencies."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.infrastructure.database.session import get_db_session
from src.modules.pages.infrastructure.mappers import PageMapper
from src.modules.pages.infrastructure.repositories import PostgreSQLPageRepository


def get_page_mapper() -> PageMapper:
    return PageMapper()


async def get_page_repository(
    session: AsyncSession = Depends(get_db_session),
    mapper: PageMapper = Depends(get_page_mapper),
) -> PostgreSQLPageRepository:
    return PostgreSQLPageRepository(session, mapper)
