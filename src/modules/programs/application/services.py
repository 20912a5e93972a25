"""Program application services."""

from loguru import logger

from src.core.domain.listing import ListQuery, total_pages
from src.core.domain.slug import is_valid_slug
from src.core.infrastructure.logging import BusinessEvents
from src.modules.programs.application.models import (
    InstructorDetailData,
    InstructorRefData,
    ProgramDetailData,
    ProgramListData,
    ProgramSummaryData,
    ScheduleData,
)
from src.modules.programs.domain.entities import Instructor, Program, Schedule
from src.modules.programs.domain.exceptions import ProgramNotFoundError
from src.modules.programs.domain.listing import ProgramFilters
from src.modules.programs.domain.repository import (
    ProgramRepository,
    ProgramRow,
    ScheduleRepository,
)
from src.modules.taxonomy.application.services import build_category_ref


def _build_instructor_ref(instructor: Instructor | None) -> InstructorRefData | None:
    if instructor is None or instructor.id is None:
        return None
    return InstructorRefData(
        id=instructor.id,
        name=instructor.name,
        slug=instructor.slug,
        photo=instructor.photo,
    )


def _build_schedule_data(schedule: Schedule) -> ScheduleData:
    return ScheduleData(
        id=schedule.id,
        start_date=schedule.start_date,
        end_date=schedule.end_date,
        location=schedule.location,
        max_participants=schedule.max_participants,
        registered_participants=schedule.registered_participants,
        available_seats=schedule.available_seats,
        price=schedule.price,
        status=schedule.status,
    )


class ProgramQueryService:
    """Program query service for list/detail views."""

    def __init__(
        self,
        program_repository: ProgramRepository,
        schedule_repository: ScheduleRepository,
        schedules_limit: int = 5,
    ) -> None:
        self.program_repo = program_repository
        self.schedule_repo = schedule_repository
        self.schedules_limit = schedules_limit
        self.logger = logger

    @staticmethod
    def build_summary_data(row: ProgramRow) -> ProgramSummaryData:
        """Convert a joined program row to list item data."""
        program, category, instructor = row
        return ProgramSummaryData(
            id=program.id,
            title=program.title,
            slug=program.slug,
            category_id=program.category_id,
            instructor_id=program.instructor_id,
            description=program.description,
            image=program.image,
            duration=program.duration,
            price=program.price,
            certificate=program.certificate,
            status=program.status,
            views=program.views,
            created_at=program.created_at,
            updated_at=program.updated_at,
            category=build_category_ref(category),
            instructor=_build_instructor_ref(instructor),
        )

    @staticmethod
    def build_detail_data(
        row: ProgramRow,
        schedules: list[Schedule] | None = None,
        views: int | None = None,
    ) -> ProgramDetailData:
        """Convert a joined program row to detail data."""
        program, category, instructor = row
        instructor_data = None
        if instructor is not None and instructor.id is not None:
            instructor_data = InstructorDetailData(
                id=instructor.id,
                name=instructor.name,
                slug=instructor.slug,
                photo=instructor.photo,
                level=instructor.level,
                bio=instructor.bio,
            )
        summary = ProgramQueryService.build_summary_data(row)
        return ProgramDetailData(
            **summary.model_dump(exclude={"instructor", "views", "category"}),
            category=summary.category,
            views=program.views if views is None else views,
            content=program.content,
            max_participants=program.max_participants,
            requirements=program.requirements,
            benefits=program.benefits,
            meta_title=program.meta_title,
            meta_description=program.meta_description,
            instructor=instructor_data,
            schedules=[_build_schedule_data(s) for s in schedules or []],
        )

    async def list_programs(
        self,
        query: ListQuery,
        filters: ProgramFilters | None = None,
    ) -> ProgramListData:
        """List programs matching the normalized query."""
        rows, total = await self.program_repo.list_page(query, filters)
        return ProgramListData(
            items=[self.build_summary_data(row) for row in rows],
            total=total,
            page=query.page,
            page_size=query.page_size,
            total_pages=total_pages(total, query.page_size),
        )

    async def get_program(self, slug: str) -> ProgramDetailData:
        """Get a published program by slug and count the view.

        返回的 views 为自增之后的值。
        """
        if not is_valid_slug(slug):
            raise ProgramNotFoundError(slug=slug)
        row = await self.program_repo.get_row_by_slug(slug, published_only=True)
        if row is None:
            raise ProgramNotFoundError(slug=slug)

        program: Program = row[0]
        schedules = await self.schedule_repo.list_upcoming(
            program.id, self.schedules_limit
        )
        views = await self.program_repo.increment_views(program.id)
        BusinessEvents.content_viewed(
            content_type="program", content_id=program.id, views=views
        )
        return self.build_detail_data(row, schedules, views=views)

    async def get_program_by_id(self, program_id: int) -> ProgramDetailData:
        """Admin lookup by id, any status, without counting a view."""
        row = await self.program_repo.get_row_by_id(program_id)
        if row is None:
            raise ProgramNotFoundError(program_id=program_id)
        return self.build_detail_data(row)
