"""Taxonomy domain entities."""

from pydantic import Field

from src.core.domain.base_entity import BaseEntity


class ProgramCategory(BaseEntity):
    """Program category - 培训项目分类，可通过 parent_id 形成树。"""

    name: str = Field(..., description="分类名称")
    slug: str = Field(..., description="URL 标识")
    description: str | None = Field(default=None, description="分类描述")
    parent_id: int | None = Field(default=None, description="父分类ID")
    display_order: int = Field(default=0, description="排序权重，越小越靠前")


class PostCategory(BaseEntity):
    """Post category - 文章分类。"""

    name: str = Field(..., description="分类名称")
    slug: str = Field(..., description="URL 标识")
    description: str | None = Field(default=None, description="分类描述")
