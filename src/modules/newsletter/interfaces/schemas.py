"""Newsletter API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class SubscribeRequest(BaseModel):
    """Newsletter sign-up form."""

    email: EmailStr = Field(..., description="邮箱")
    name: str | None = Field(None, max_length=255, description="姓名")

    @field_validator("name", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str):
            return value.strip() or None
        return value


class SubscribeResponse(BaseModel):
    email: str = Field(..., description="订阅邮箱")
    status: str = Field(..., description="订阅状态")


class SubscriberResponse(BaseModel):
    """Subscriber row in the admin console."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="订阅者ID")
    email: str = Field(..., description="邮箱")
    name: str | None = Field(None, description="姓名")
    status: str = Field(..., description="状态")
    subscribed_at: datetime | None = Field(None, description="订阅时间")
    unsubscribed_at: datetime | None = Field(None, description="退订时间")
    created_at: datetime = Field(..., description="创建时间")
