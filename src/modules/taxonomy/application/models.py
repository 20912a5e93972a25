"""Taxonomy application data models."""

from pydantic import BaseModel


class CategoryRefData(BaseModel):
    """Category reference embedded in content items."""

    id: int
    name: str
    slug: str


class ProgramCategoryData(BaseModel):
    """Program category data for queries."""

    id: int
    name: str
    slug: str
    description: str | None = None
    parent_id: int | None = None
    display_order: int = 0


class PostCategoryData(BaseModel):
    """Post category data for queries."""

    id: int
    name: str
    slug: str
    description: str | None = None
