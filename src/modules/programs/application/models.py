"""Program application data models."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel

from src.modules.programs.domain.entities import (
    InstructorLevel,
    ProgramStatus,
    ScheduleStatus,
)
from src.modules.taxonomy.application.models import CategoryRefData


class InstructorRefData(BaseModel):
    """Instructor embedded in program listings."""

    id: int
    name: str
    slug: str
    photo: str | None = None


class InstructorDetailData(InstructorRefData):
    level: InstructorLevel
    bio: str | None = None


class ScheduleData(BaseModel):
    """Upcoming schedule shown on the program page."""

    id: int
    start_date: datetime
    end_date: datetime
    location: str | None = None
    max_participants: int
    registered_participants: int
    available_seats: int
    price: Decimal | None = None
    status: ScheduleStatus


class ProgramSummaryData(BaseModel):
    """Program list item."""

    id: int
    title: str
    slug: str
    category_id: int | None = None
    instructor_id: int | None = None
    description: str | None = None
    image: str | None = None
    duration: str | None = None
    price: Decimal
    certificate: bool
    status: ProgramStatus
    views: int
    created_at: datetime
    updated_at: datetime
    category: CategoryRefData | None = None
    instructor: InstructorRefData | None = None


class ProgramDetailData(ProgramSummaryData):
    """Program detail with content, instructor bio and schedules."""

    content: str | None = None
    max_participants: int | None = None
    requirements: str | None = None
    benefits: list[str] = []
    meta_title: str | None = None
    meta_description: str | None = None
    instructor: InstructorDetailData | None = None
    schedules: list[ScheduleData] = []


class ProgramListData(BaseModel):
    """Program list query result."""

    items: list[ProgramSummaryData]
    total: int
    page: int
    page_size: int
    total_pages: int
