"""Newsletter application data models."""

from datetime import datetime

from pydantic import BaseModel

from src.modules.newsletter.domain.entities import SubscriberStatus


class SubscriberData(BaseModel):
    """Subscriber as listed in the admin console (token omitted)."""

    id: int
    email: str
    name: str | None = None
    status: SubscriberStatus
    subscribed_at: datetime | None = None
    unsubscribed_at: datetime | None = None
    created_at: datetime


class SubscriberListData(BaseModel):
    items: list[SubscriberData]
    total: int
    page: int
    page_size: int
    total_pages: int
