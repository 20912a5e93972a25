"""Taxonomy database models."""

from sqlalchemy import Text
from sqlmodel import Field

from src.core.infrastructure.database.base_model import BaseModel


class ProgramCategoryModel(BaseModel, table=True):
    """Program category database model."""

    __tablename__ = "program_categories"

    name: str = Field(nullable=False, max_length=255)
    slug: str = Field(nullable=False, unique=True, index=True, max_length=255)
    description: str | None = Field(default=None, sa_type=Text, nullable=True)
    parent_id: int | None = Field(
        default=None,
        foreign_key="program_categories.id",
        nullable=True,
        index=True,
    )
    display_order: int = Field(default=0, nullable=False)


class PostCategoryModel(BaseModel, table=True):
    """Post category database model."""

    __tablename__ = "post_categories"

    name: str = Field(nullable=False, max_length=255)
    slug: str = Field(nullable=False, unique=True, index=True, max_length=255)
    description: str | None = Field(default=None, sa_type=Text, nullable=True)
