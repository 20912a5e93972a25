"""Program repository implementations."""

from loguru import logger
from sqlalchemy import ColumnElement, delete, update
from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from src.core.domain.exceptions import EntityNotFoundError
from src.core.domain.listing import PUBLISHED_STATUS, ListQuery
from src.core.infrastructure.database.errors import flush_in_savepoint
from src.core.infrastructure.database.listing import ListColumns, fetch_page
from src.modules.programs.domain.entities import Program, Schedule, ScheduleStatus
from src.modules.programs.domain.exceptions import ProgramSlugExistsError
from src.modules.programs.domain.listing import ProgramFilters
from src.modules.programs.domain.repository import (
    ProgramRepository,
    ProgramRow,
    ScheduleRepository,
)
from src.modules.programs.infrastructure.mappers import (
    InstructorMapper,
    ProgramMapper,
    ScheduleMapper,
)
from src.modules.programs.infrastructure.models import (
    InstructorModel,
    ProgramModel,
    ScheduleModel,
)
from src.modules.taxonomy.infrastructure.mappers import ProgramCategoryMapper
from src.modules.taxonomy.infrastructure.models import ProgramCategoryModel

PROGRAM_LIST_COLUMNS = ListColumns(
    model=ProgramModel,
    id=col(ProgramModel.id),
    status=col(ProgramModel.status),
    category=col(ProgramModel.category_id),
    sort={
        "id": col(ProgramModel.id),
        "title": col(ProgramModel.title),
        "price": col(ProgramModel.price),
        "created_at": col(ProgramModel.created_at),
        "updated_at": col(ProgramModel.updated_at),
        "views": col(ProgramModel.views),
    },
    search=(
        col(ProgramModel.title),
        col(ProgramModel.description),
        col(ProgramModel.content),
    ),
)


class PostgreSQLProgramRepository(ProgramRepository):
    """PostgreSQL program repository implementation."""

    def __init__(
        self,
        session: AsyncSession,
        mapper: ProgramMapper,
        category_mapper: ProgramCategoryMapper | None = None,
        instructor_mapper: InstructorMapper | None = None,
    ):
        self.session = session
        self.mapper = mapper
        self.category_mapper = category_mapper or ProgramCategoryMapper()
        self.instructor_mapper = instructor_mapper or InstructorMapper()
        self.logger = logger

    def _joined_select(self):
        return (
            select(ProgramModel, ProgramCategoryModel, InstructorModel)
            .outerjoin(
                ProgramCategoryModel,
                col(ProgramModel.category_id) == col(ProgramCategoryModel.id),
            )
            .outerjoin(
                InstructorModel,
                col(ProgramModel.instructor_id) == col(InstructorModel.id),
            )
        )

    def _to_row(self, row: Row) -> ProgramRow:
        return (
            self.mapper.to_domain(row.ProgramModel),
            self.category_mapper.to_domain_or_none(row.ProgramCategoryModel),
            self.instructor_mapper.to_domain_or_none(row.InstructorModel),
        )

    @staticmethod
    def _filter_conditions(filters: ProgramFilters | None) -> list[ColumnElement[bool]]:
        if filters is None:
            return []
        conditions: list[ColumnElement[bool]] = []
        if filters.instructor_id is not None:
            conditions.append(col(ProgramModel.instructor_id) == filters.instructor_id)
        if filters.min_price is not None:
            conditions.append(col(ProgramModel.price) >= filters.min_price)
        if filters.max_price is not None:
            conditions.append(col(ProgramModel.price) <= filters.max_price)
        return conditions

    async def list_page(
        self,
        query: ListQuery,
        filters: ProgramFilters | None = None,
    ) -> tuple[list[ProgramRow], int]:
        rows, total = await fetch_page(
            self.session,
            self._joined_select(),
            query,
            PROGRAM_LIST_COLUMNS,
            extra=self._filter_conditions(filters),
        )
        return [self._to_row(row) for row in rows], total

    async def get_row_by_slug(
        self, slug: str, published_only: bool = True
    ) -> ProgramRow | None:
        statement = self._joined_select().where(col(ProgramModel.slug) == slug)
        if published_only:
            statement = statement.where(col(ProgramModel.status) == PUBLISHED_STATUS)
        result = await self.session.execute(statement)
        row = result.first()
        return self._to_row(row) if row else None

    async def get_row_by_id(self, program_id: int) -> ProgramRow | None:
        statement = self._joined_select().where(col(ProgramModel.id) == program_id)
        result = await self.session.execute(statement)
        row = result.first()
        return self._to_row(row) if row else None

    async def get_by_id(self, program_id: int) -> Program | None:
        model = await self.session.get(ProgramModel, program_id)
        return self.mapper.to_domain(model) if model else None

    async def exists_by_slug(self, slug: str, exclude_id: int | None = None) -> bool:
        statement = select(ProgramModel.id).where(col(ProgramModel.slug) == slug)
        if exclude_id is not None:
            statement = statement.where(col(ProgramModel.id) != exclude_id)
        result = await self.session.execute(statement)
        return result.first() is not None

    async def missing_references(
        self,
        category_id: int | None = None,
        instructor_id: int | None = None,
    ) -> list[str]:
        missing: list[str] = []
        if category_id is not None and not await self.session.get(
            ProgramCategoryModel, category_id
        ):
            missing.append("category_id")
        if instructor_id is not None and not await self.session.get(
            InstructorModel, instructor_id
        ):
            missing.append("instructor_id")
        return missing

    async def increment_views(self, program_id: int) -> int:
        statement = (
            update(ProgramModel)
            .where(col(ProgramModel.id) == program_id)
            .values(views=col(ProgramModel.views) + 1)
            .returning(col(ProgramModel.views))
        )
        result = await self.session.execute(statement)
        views = result.scalar_one_or_none()
        if views is None:
            raise EntityNotFoundError("Program", program_id)
        return views

    async def create(self, program: Program) -> Program:
        model = self.mapper.to_model(program)
        await flush_in_savepoint(
            self.session, model, lambda: ProgramSlugExistsError(program.slug)
        )
        await self.session.refresh(model)
        return self.mapper.to_domain(model)

    async def update(self, program: Program) -> Program:
        existing = await self.session.get(ProgramModel, program.id)
        if not existing:
            raise EntityNotFoundError("Program", program.id)

        # views 只通过 increment_views 原子更新，这里保留数据库中的值
        stored_views = existing.views
        self.mapper.apply_to_model(program, existing)
        existing.views = stored_views

        await flush_in_savepoint(
            self.session, existing, lambda: ProgramSlugExistsError(program.slug)
        )
        await self.session.refresh(existing)
        return self.mapper.to_domain(existing)

    async def delete(self, program_id: int) -> bool:
        result = await self.session.execute(
            delete(ProgramModel).where(col(ProgramModel.id) == program_id)
        )
        return result.rowcount > 0


class PostgreSQLScheduleRepository(ScheduleRepository):
    """PostgreSQL schedule repository implementation."""

    def __init__(self, session: AsyncSession, mapper: ScheduleMapper):
        self.session = session
        self.mapper = mapper
        self.logger = logger

    async def list_upcoming(self, program_id: int, limit: int) -> list[Schedule]:
        statement = (
            select(ScheduleModel)
            .where(
                col(ScheduleModel.program_id) == program_id,
                col(ScheduleModel.status) == ScheduleStatus.UPCOMING,
            )
            .order_by(col(ScheduleModel.start_date).asc(), col(ScheduleModel.id).asc())
            .limit(limit)
        )
        result = await self.session.execute(statement)
        return self.mapper.to_domain_list(list(result.scalars().all()))

    async def delete_by_program(self, program_id: int) -> int:
        result = await self.session.execute(
            delete(ScheduleModel).where(col(ScheduleModel.program_id) == program_id)
        )
        return result.rowcount
