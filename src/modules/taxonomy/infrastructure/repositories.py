"""Taxonomy repository implementations."""

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from src.modules.taxonomy.domain.entities import PostCategory, ProgramCategory
from src.modules.taxonomy.domain.repository import (
    PostCategoryRepository,
    ProgramCategoryRepository,
)
from src.modules.taxonomy.infrastructure.mappers import (
    PostCategoryMapper,
    ProgramCategoryMapper,
)
from src.modules.taxonomy.infrastructure.models import (
    PostCategoryModel,
    ProgramCategoryModel,
)


class PostgreSQLProgramCategoryRepository(ProgramCategoryRepository):
    """PostgreSQL program category repository implementation."""

    def __init__(self, session: AsyncSession, mapper: ProgramCategoryMapper):
        self.session = session
        self.mapper = mapper
        self.logger = logger

    async def list_ordered(self) -> list[ProgramCategory]:
        statement = select(ProgramCategoryModel).order_by(
            col(ProgramCategoryModel.display_order).asc(),
            col(ProgramCategoryModel.name).asc(),
        )
        result = await self.session.execute(statement)
        return self.mapper.to_domain_list(list(result.scalars().all()))


class PostgreSQLPostCategoryRepository(PostCategoryRepository):
    """PostgreSQL post category repository implementation."""

    def __init__(self, session: AsyncSession, mapper: PostCategoryMapper):
        self.session = session
        self.mapper = mapper
        self.logger = logger

    async def list_ordered(self) -> list[PostCategory]:
        statement = select(PostCategoryModel).order_by(
            col(PostCategoryModel.name).asc()
        )
        result = await self.session.execute(statement)
        return self.mapper.to_domain_list(list(result.scalars().all()))
