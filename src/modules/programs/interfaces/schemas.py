"""Program API schemas."""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from src.modules.taxonomy.interfaces.schemas import CategoryRefResponse


class ProgramStatus(str, Enum):
    """Program status enum for API layer."""

    DRAFT = "draft"
    PUBLISHED = "published"
    UPCOMING = "upcoming"
    ARCHIVED = "archived"


def _parse_yes_no(value: Any) -> Any:
    # 后台表单以 "yes"/"no" 提交
    if isinstance(value, str) and value.lower() in ("yes", "no"):
        return value.lower() == "yes"
    return value


YesNoBool = Annotated[bool, BeforeValidator(_parse_yes_no)]


class InstructorRefResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    slug: str
    photo: str | None = None


class InstructorDetailResponse(InstructorRefResponse):
    level: str
    bio: str | None = None


class ScheduleResponse(BaseModel):
    """Upcoming schedule."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="排期ID")
    start_date: datetime = Field(..., description="开始时间")
    end_date: datetime = Field(..., description="结束时间")
    location: str | None = Field(None, description="地点")
    max_participants: int = Field(..., description="名额")
    registered_participants: int = Field(..., description="已报名")
    available_seats: int = Field(..., description="剩余名额，不小于 0")
    price: Decimal | None = Field(None, description="本期价格")
    status: str = Field(..., description="状态")


class ProgramSummaryResponse(BaseModel):
    """Program list item response."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="项目ID")
    title: str = Field(..., description="标题")
    slug: str = Field(..., description="slug")
    category_id: int | None = Field(None, description="分类ID")
    instructor_id: int | None = Field(None, description="讲师ID")
    description: str | None = Field(None, description="简介")
    image: str | None = Field(None, description="封面图")
    duration: str | None = Field(None, description="时长")
    price: Decimal = Field(..., description="价格")
    certificate: bool = Field(..., description="是否颁发证书")
    status: str = Field(..., description="状态")
    views: int = Field(..., description="浏览量")
    created_at: datetime = Field(..., description="创建时间")
    updated_at: datetime = Field(..., description="更新时间")
    category: CategoryRefResponse | None = Field(None, description="分类")
    instructor: InstructorRefResponse | None = Field(None, description="讲师")


class ProgramDetailResponse(ProgramSummaryResponse):
    """Program detail response."""

    content: str | None = Field(None, description="正文")
    max_participants: int | None = Field(None, description="人数上限")
    requirements: str | None = Field(None, description="报名要求")
    benefits: list[str] = Field(default_factory=list, description="收益")
    meta_title: str | None = Field(None, description="SEO 标题")
    meta_description: str | None = Field(None, description="SEO 描述")
    instructor: InstructorDetailResponse | None = Field(None, description="讲师")
    schedules: list[ScheduleResponse] = Field(
        default_factory=list, description="即将开班的排期"
    )


class CreateProgramRequest(BaseModel):
    """Create program request."""

    title: str = Field(..., min_length=3, max_length=255, description="标题")
    slug: str | None = Field(
        None,
        min_length=3,
        max_length=255,
        pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$",
        description="slug，缺省时由标题生成",
    )
    category_id: int | None = Field(None, description="分类ID")
    instructor_id: int | None = Field(None, description="讲师ID")
    description: str | None = None
    content: str | None = None
    image: str | None = None
    duration: str | None = None
    price: Decimal = Field(Decimal("0"), ge=0, description="价格")
    max_participants: int | None = Field(None, ge=1)
    requirements: str | None = None
    benefits: list[str] = Field(default_factory=list)
    certificate: YesNoBool = Field(True, description="是否颁发证书，接受 yes/no")
    status: ProgramStatus = Field(ProgramStatus.DRAFT, description="状态")
    meta_title: str | None = None
    meta_description: str | None = None

    class Config:
        json_schema_extra = {
            "example": {
                "title": "Leadership Essentials",
                "category_id": 6,
                "price": 2500000,
                "duration": "3 days",
                "benefits": ["Certificate", "Lunch"],
                "certificate": "yes",
                "status": "published",
            }
        }


class UpdateProgramRequest(BaseModel):
    """Update program request; omitted fields stay unchanged."""

    title: str | None = Field(None, min_length=3, max_length=255)
    slug: str | None = Field(
        None,
        max_length=255,
        pattern=r"^$|^[a-z0-9]+(?:-[a-z0-9]+)*$",
    )
    category_id: int | None = None
    instructor_id: int | None = None
    description: str | None = None
    content: str | None = None
    image: str | None = None
    duration: str | None = None
    price: Decimal | None = Field(None, ge=0)
    max_participants: int | None = Field(None, ge=1)
    requirements: str | None = None
    benefits: list[str] | None = None
    certificate: YesNoBool | None = None
    status: ProgramStatus | None = None
    meta_title: str | None = None
    meta_description: str | None = None

    def to_changes(self) -> dict[str, Any]:
        """Explicitly provided fields, dropping nulls for non-nullable columns."""
        changes = self.model_dump(exclude_unset=True, mode="json")
        for key in ("title", "price", "benefits", "certificate", "status"):
            if key in changes and changes[key] is None:
                changes.pop(key)
        return changes
