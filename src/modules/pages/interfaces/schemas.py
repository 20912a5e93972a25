"""Page API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PageResponse(BaseModel):
    """Static page response."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="页面ID")
    title: str = Field(..., description="标题")
    slug: str = Field(..., description="slug")
    content: str | None = Field(None, description="正文")
    template: str = Field(..., description="模板")
    meta_title: str | None = None
    meta_description: str | None = None
    updated_at: datetime = Field(..., description="更新时间")
