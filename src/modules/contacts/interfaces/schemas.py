"""Contact API schemas."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class ContactStatus(str, Enum):
    """Contact status enum for API layer."""

    UNREAD = "unread"
    READ = "read"
    REPLIED = "replied"
    ARCHIVED = "archived"


class ContactCreateRequest(BaseModel):
    """Public contact form."""

    name: str = Field(..., min_length=2, max_length=255, description="姓名")
    email: EmailStr = Field(..., description="邮箱")
    phone: str | None = Field(None, max_length=50, description="电话")
    subject: str | None = Field(None, min_length=3, max_length=255, description="主题")
    message: str = Field(..., min_length=10, max_length=5000, description="留言")

    @field_validator("name", "message", mode="before")
    @classmethod
    def _strip(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("phone", "subject", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        # 表单中未填写的可选字段以空字符串提交
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value


class ContactSubmittedResponse(BaseModel):
    id: int = Field(..., description="留言ID")


class ContactResponse(BaseModel):
    """Contact message in the admin inbox."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: str | None = None
    subject: str | None = None
    message: str
    status: str = Field(..., description="状态")
    ip_address: str | None = None
    user_agent: str | None = None
    read_at: datetime | None = None
    replied_at: datetime | None = None
    created_at: datetime


class UpdateContactStatusRequest(BaseModel):
    status: ContactStatus = Field(..., description="新状态")
