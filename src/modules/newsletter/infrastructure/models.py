"""Newsletter database model."""

from datetime import datetime

from sqlalchemy import DateTime, Enum
from sqlmodel import Field

from src.core.infrastructure.database.base_model import BaseModel
from src.modules.newsletter.domain.entities import SubscriberStatus


class NewsletterSubscriberModel(BaseModel, table=True):
    """Newsletter subscriber database model."""

    __tablename__ = "newsletter_subscribers"

    email: str = Field(nullable=False, unique=True, index=True, max_length=255)
    name: str | None = Field(default=None, nullable=True, max_length=255)
    status: SubscriberStatus = Field(
        default=SubscriberStatus.ACTIVE,
        sa_type=Enum(
            SubscriberStatus,
            name="subscriberstatus",
            values_callable=lambda e: [i.value for i in e],
            create_constraint=False,
        ),
        nullable=False,
        index=True,
    )
    token: str | None = Field(default=None, nullable=True, unique=True, max_length=64)
    subscribed_at: datetime | None = Field(
        default=None, sa_type=DateTime(timezone=True), nullable=True
    )
    unsubscribed_at: datetime | None = Field(
        default=None, sa_type=DateTime(timezone=True), nullable=True
    )
