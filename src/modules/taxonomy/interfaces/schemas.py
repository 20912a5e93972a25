"""Taxonomy API schemas."""

from pydantic import BaseModel, ConfigDict, Field


class CategoryRefResponse(BaseModel):
    """Category embedded in a program/post."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="分类ID")
    name: str = Field(..., description="分类名称")
    slug: str = Field(..., description="分类 slug")


class ProgramCategoryResponse(BaseModel):
    """Program category response."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="分类ID")
    name: str = Field(..., description="分类名称")
    slug: str = Field(..., description="分类 slug")
    description: str | None = Field(None, description="分类描述")
    parent_id: int | None = Field(None, description="父分类ID")
    display_order: int = Field(0, description="排序权重")


class PostCategoryResponse(BaseModel):
    """Post category response."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="分类ID")
    name: str = Field(..., description="分类名称")
    slug: str = Field(..., description="分类 slug")
    description: str | None = Field(None, description="分类描述")
