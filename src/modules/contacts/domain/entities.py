"""Contact domain entities."""

from datetime import UTC, datetime
from enum import Enum

from pydantic import Field

from src.core.domain.base_entity import BaseEntity


class ContactStatus(str, Enum):
    """Contact message status enum."""

    UNREAD = "unread"
    READ = "read"
    REPLIED = "replied"
    ARCHIVED = "archived"


class Contact(BaseEntity):
    """Contact - 联系表单留言。"""

    name: str = Field(..., description="姓名")
    email: str = Field(..., description="邮箱")
    phone: str | None = Field(default=None, description="电话")
    subject: str | None = Field(default=None, description="主题")
    message: str = Field(..., description="留言内容")
    status: ContactStatus = Field(default=ContactStatus.UNREAD, description="状态")
    ip_address: str | None = Field(default=None, description="提交者 IP")
    user_agent: str | None = Field(default=None, description="提交者 UA")
    read_at: datetime | None = Field(default=None, description="首次阅读时间")
    replied_at: datetime | None = Field(default=None, description="回复时间")

    def change_status(self, status: ContactStatus, now: datetime | None = None) -> None:
        """Move to a new status, stamping read_at / replied_at the first time."""
        now = now or datetime.now(UTC)
        if status in (ContactStatus.READ, ContactStatus.REPLIED) and self.read_at is None:
            self.read_at = now
        if status == ContactStatus.REPLIED and self.replied_at is None:
            self.replied_at = now
        self.status = status
        self._update_timestamp()
