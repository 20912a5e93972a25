"""Program database models."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import JSON, DateTime, Enum, Numeric, Text
from sqlmodel import Field

from src.core.infrastructure.database.base_model import BaseModel
from src.modules.programs.domain.entities import (
    InstructorLevel,
    InstructorStatus,
    ProgramStatus,
    ScheduleStatus,
)


def _enum_type(enum_cls: type, name: str) -> Enum:
    return Enum(
        enum_cls,
        name=name,
        values_callable=lambda e: [i.value for i in e],
        create_constraint=False,
    )


class InstructorModel(BaseModel, table=True):
    """Instructor database model."""

    __tablename__ = "instructors"

    name: str = Field(nullable=False, max_length=255)
    slug: str = Field(nullable=False, unique=True, index=True, max_length=255)
    level: InstructorLevel = Field(
        default=InstructorLevel.REGULAR,
        sa_type=_enum_type(InstructorLevel, "instructorlevel"),
        nullable=False,
    )
    bio: str | None = Field(default=None, sa_type=Text, nullable=True)
    photo: str | None = Field(default=None, nullable=True, max_length=500)
    status: InstructorStatus = Field(
        default=InstructorStatus.ACTIVE,
        sa_type=_enum_type(InstructorStatus, "instructorstatus"),
        nullable=False,
    )
    display_order: int = Field(default=0, nullable=False)


class ProgramModel(BaseModel, table=True):
    """Program database model."""

    __tablename__ = "programs"

    title: str = Field(nullable=False, max_length=255)
    slug: str = Field(nullable=False, unique=True, index=True, max_length=255)
    category_id: int | None = Field(
        default=None, foreign_key="program_categories.id", nullable=True, index=True
    )
    instructor_id: int | None = Field(
        default=None, foreign_key="instructors.id", nullable=True, index=True
    )
    description: str | None = Field(default=None, sa_type=Text, nullable=True)
    content: str | None = Field(default=None, sa_type=Text, nullable=True)
    image: str | None = Field(default=None, nullable=True, max_length=500)
    duration: str | None = Field(default=None, nullable=True, max_length=100)
    price: Decimal = Field(default=Decimal("0"), sa_type=Numeric(12, 2), nullable=False)
    max_participants: int | None = Field(default=None, nullable=True)
    requirements: str | None = Field(default=None, sa_type=Text, nullable=True)
    benefits: list = Field(default_factory=list, sa_type=JSON, nullable=False)
    certificate: bool = Field(default=False, nullable=False)
    status: ProgramStatus = Field(
        default=ProgramStatus.DRAFT,
        sa_type=_enum_type(ProgramStatus, "programstatus"),
        nullable=False,
        index=True,
    )
    views: int = Field(default=0, nullable=False)
    meta_title: str | None = Field(default=None, nullable=True, max_length=255)
    meta_description: str | None = Field(default=None, sa_type=Text, nullable=True)


class ScheduleModel(BaseModel, table=True):
    """Program schedule database model."""

    __tablename__ = "schedules"

    program_id: int = Field(foreign_key="programs.id", nullable=False, index=True)
    start_date: datetime = Field(
        sa_type=DateTime(timezone=True), nullable=False, index=True
    )
    end_date: datetime = Field(sa_type=DateTime(timezone=True), nullable=False)
    location: str | None = Field(default=None, nullable=True, max_length=255)
    max_participants: int = Field(default=20, nullable=False)
    registered_participants: int = Field(default=0, nullable=False)
    price: Decimal | None = Field(default=None, sa_type=Numeric(12, 2), nullable=True)
    status: ScheduleStatus = Field(
        default=ScheduleStatus.UPCOMING,
        sa_type=_enum_type(ScheduleStatus, "schedulestatus"),
        nullable=False,
        index=True,
    )
