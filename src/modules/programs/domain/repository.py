"""Program repository interfaces."""

from abc import ABC, abstractmethod

from src.core.domain.listing import ListQuery
from src.core.domain.repository import BaseRepository
from src.modules.programs.domain.entities import Instructor, Program, Schedule
from src.modules.programs.domain.listing import ProgramFilters
from src.modules.taxonomy.domain.entities import ProgramCategory

# 列表/详情查询返回的 JOIN 结果：(项目, 分类, 讲师)，分类和讲师可能为空
ProgramRow = tuple[Program, ProgramCategory | None, Instructor | None]


class ProgramRepository(BaseRepository[Program]):
    """Program repository interface."""

    @abstractmethod
    async def list_page(
        self,
        query: ListQuery,
        filters: ProgramFilters | None = None,
    ) -> tuple[list[ProgramRow], int]:
        """One page of programs plus the total matching the same filters."""
        pass

    @abstractmethod
    async def get_row_by_slug(
        self, slug: str, published_only: bool = True
    ) -> ProgramRow | None:
        """Get program with category and instructor by slug."""
        pass

    @abstractmethod
    async def get_row_by_id(self, program_id: int) -> ProgramRow | None:
        """Get program with category and instructor by id (any status)."""
        pass

    @abstractmethod
    async def exists_by_slug(self, slug: str, exclude_id: int | None = None) -> bool:
        pass

    @abstractmethod
    async def missing_references(
        self,
        category_id: int | None = None,
        instructor_id: int | None = None,
    ) -> list[str]:
        """Names of the given reference fields whose rows do not exist."""
        pass

    @abstractmethod
    async def increment_views(self, program_id: int) -> int:
        """Atomically add one view and return the stored count."""
        pass


class ScheduleRepository(ABC):
    """Schedule repository interface."""

    @abstractmethod
    async def list_upcoming(self, program_id: int, limit: int) -> list[Schedule]:
        """Upcoming schedules ordered by start date."""
        pass

    @abstractmethod
    async def delete_by_program(self, program_id: int) -> int:
        """Delete all schedules of a program, returning the count."""
        pass
