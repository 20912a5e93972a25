"""Post module dependencies."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.infrastructure.database.session import get_db_session
from src.modules.posts.infrastructure.mappers import PostMapper
from src.modules.posts.infrastructure.repositories import PostgreSQLPostRepository


def get_post_mapper() -> PostMapper:
    return PostMapper()


async def get_post_repository(
    session: AsyncSession = Depends(get_db_session),
    mapper: PostMapper = Depends(get_post_mapper),
) -> PostgreSQLPostRepository:
    return PostgreSQLPostRepository(session, mapper)
