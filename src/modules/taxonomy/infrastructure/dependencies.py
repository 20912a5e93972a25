"""Taxonomy module dependencies."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.infrastructure.database.session import get_db_session
from src.modules.taxonomy.infrastructure.mappers import (
    PostCategoryMapper,
    ProgramCategoryMapper,
)
from src.modules.taxonomy.infrastructure.repositories import (
    PostgreSQLPostCategoryRepository,
    PostgreSQLProgramCategoryRepository,
)


def get_program_category_mapper() -> ProgramCategoryMapper:
    return ProgramCategoryMapper()


def get_post_category_mapper() -> PostCategoryMapper:
    return PostCategoryMapper()


async def get_program_category_repository(
    session: AsyncSession = Depends(get_db_session),
    mapper: ProgramCategoryMapper = Depends(get_program_category_mapper),
) -> PostgreSQLProgramCategoryRepository:
    return PostgreSQLProgramCategoryRepository(session, mapper)


async def get_post_category_repository(
    session: AsyncSession = Depends(get_db_session),
    mapper: PostCategoryMapper = Depends(get_post_category_mapper),
) -> PostgreSQLPostCategoryRepository:
    return PostgreSQLPostCategoryRepository(session, mapper)
