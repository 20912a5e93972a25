"""Program domain entities."""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import Field

from src.core.domain.base_entity import BaseEntity


class ProgramStatus(str, Enum):
    """Program status enum."""

    DRAFT = "draft"
    PUBLISHED = "published"
    UPCOMING = "upcoming"
    ARCHIVED = "archived"


class InstructorLevel(str, Enum):
    """Instructor seniority."""

    JUNIOR = "junior"
    REGULAR = "regular"
    SENIOR = "senior"
    MASTER = "master"


class InstructorStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class ScheduleStatus(str, Enum):
    """Schedule status enum."""

    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Program(BaseEntity):
    """Program - 培训项目。"""

    title: str = Field(..., description="项目标题")
    slug: str = Field(..., description="URL 标识，全局唯一")
    category_id: int | None = Field(default=None, description="分类ID")
    instructor_id: int | None = Field(default=None, description="讲师ID")
    description: str | None = Field(default=None, description="简介")
    content: str | None = Field(default=None, description="正文")
    image: str | None = Field(default=None, description="封面图")
    duration: str | None = Field(default=None, description="时长描述，如 3 days")
    price: Decimal = Field(default=Decimal("0"), ge=0, description="价格")
    max_participants: int | None = Field(default=None, ge=1, description="人数上限")
    requirements: str | None = Field(default=None, description="报名要求")
    benefits: list[str] = Field(default_factory=list, description="收益列表")
    certificate: bool = Field(default=False, description="是否颁发证书")
    status: ProgramStatus = Field(default=ProgramStatus.DRAFT, description="状态")
    views: int = Field(default=0, ge=0, description="浏览量")
    meta_title: str | None = Field(default=None, description="SEO 标题")
    meta_description: str | None = Field(default=None, description="SEO 描述")

    def apply_changes(self, changes: dict[str, Any]) -> None:
        """Apply a partial update; views and id are never written here."""
        for key, value in changes.items():
            if key in {"id", "views", "created_at", "updated_at"}:
                continue
            setattr(self, key, value)
        self._update_timestamp()

    @property
    def is_published(self) -> bool:
        return self.status == ProgramStatus.PUBLISHED


class Instructor(BaseEntity):
    """Instructor - 讲师。"""

    name: str = Field(..., description="姓名")
    slug: str = Field(..., description="URL 标识")
    level: InstructorLevel = Field(default=InstructorLevel.REGULAR, description="级别")
    bio: str | None = Field(default=None, description="简介")
    photo: str | None = Field(default=None, description="照片")
    status: InstructorStatus = Field(default=InstructorStatus.ACTIVE)
    display_order: int = Field(default=0)


class Schedule(BaseEntity):
    """Schedule - 某个项目的一期开班安排。"""

    program_id: int = Field(..., description="项目ID")
    start_date: datetime = Field(..., description="开始时间")
    end_date: datetime = Field(..., description="结束时间")
    location: str | None = Field(default=None, description="地点")
    max_participants: int = Field(default=20, ge=1, description="名额")
    registered_participants: int = Field(default=0, ge=0, description="已报名人数")
    price: Decimal | None = Field(default=None, ge=0, description="本期价格")
    status: ScheduleStatus = Field(default=ScheduleStatus.UPCOMING)

    @property
    def available_seats(self) -> int:
        # 允许超额报名，剩余名额不显示为负数
        return max(0, self.max_participants - self.registered_participants)
