"""Page database model."""

from sqlalchemy import Enum, Text
from sqlmodel import Field

from src.core.infrastructure.database.base_model import BaseModel
from src.modules.pages.domain.entities import PageStatus


class PageModel(BaseModel, table=True):
    __tablename__ = "pages"

    title: str = Field(nullable=False, max_length=255)
    slug: str = Field(nullable=False, unique=True, index=True, max_length=255)
    content: str | None = Field(default=None, sa_type=Text, nullable=True)
    template: str = Field(default="default", nullable=False, max_length=50)
    status: PageStatus = Field(
        default=PageStatus.DRAFT,
        sa_type=Enum(
            PageStatus,
            name="pagestatus",
            values_callable=lambda e: [i.value for i in e],
            create_constraint=False,
        ),
        nullable=False,
    )
    meta_title: str | None = Field(default=None, nullable=True, max_length=255)
    meta_description: str | None = Field(default=None, sa_type=Text, nullable=True)
