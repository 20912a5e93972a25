"""Newsletter domain entities."""

from datetime import UTC, datetime
from enum import Enum

from pydantic import Field

from src.core.domain.base_entity import BaseEntity


class SubscriberStatus(str, Enum):
    ACTIVE = "active"
    UNSUBSCRIBED = "unsubscribed"
    BOUNCED = "bounced"


class NewsletterSubscriber(BaseEntity):
    """NewsletterSubscriber - 邮件订阅者。"""

    email: str = Field(..., description="邮箱，唯一")
    name: str | None = Field(default=None, description="姓名")
    status: SubscriberStatus = Field(default=SubscriberStatus.ACTIVE)
    token: str | None = Field(default=None, description="退订令牌")
    subscribed_at: datetime | None = Field(default=None, description="订阅时间")
    unsubscribed_at: datetime | None = Field(default=None, description="退订时间")

    @property
    def is_active(self) -> bool:
        return self.status == SubscriberStatus.ACTIVE

    def reactivate(self, name: str | None = None, now: datetime | None = None) -> None:
        """Resubscribe an unsubscribed or bounced address."""
        self.status = SubscriberStatus.ACTIVE
        self.subscribed_at = now or datetime.now(UTC)
        self.unsubscribed_at = None
        if name:
            self.name = name
        self._update_timestamp()
