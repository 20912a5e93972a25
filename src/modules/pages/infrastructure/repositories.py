"""Page repository implementation."""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from src.modules.pages.domain.entities import Page, PageStatus
from src.modules.pages.domain.repository import PageRepository
from src.modules.pages.infrastructure.mappers import PageMapper
from src.modules.pages.infrastructure.models import PageModel


class PostgreSQLPageRepository(PageRepository):
    def __init__(self, session: AsyncSession, mapper: PageMapper):
        self.session = session
        self.mapper = mapper

    async def get_published_by_slug(self, slug: str) -> Page | None:
        statement = select(PageModel).where(
            col(PageModel.slug) == slug,
            col(PageModel.status) == PageStatus.PUBLISHED,
        )
        result = await self.session.execute(statement)
        model = result.scalars().first()
        return self.mapper.to_domain(model) if model else None
