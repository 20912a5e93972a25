"""Contact database model."""

from datetime import datetime

from sqlalchemy import DateTime, Enum, Text
from sqlmodel import Field

from src.core.infrastructure.database.base_model import BaseModel
from src.modules.contacts.domain.entities import ContactStatus


class ContactModel(BaseModel, table=True):
    """Contact database model."""

    __tablename__ = "contacts"

    name: str = Field(nullable=False, max_length=255)
    email: str = Field(nullable=False, index=True, max_length=255)
    phone: str | None = Field(default=None, nullable=True, max_length=50)
    subject: str | None = Field(default=None, nullable=True, max_length=255)
    message: str = Field(sa_type=Text, nullable=False)
    status: ContactStatus = Field(
        default=ContactStatus.UNREAD,
        sa_type=Enum(
            ContactStatus,
            name="contactstatus",
            values_callable=lambda e: [i.value for i in e],
            create_constraint=False,
        ),
        nullable=False,
        index=True,
    )
    ip_address: str | None = Field(default=None, nullable=True, max_length=45)
    user_agent: str | None = Field(default=None, sa_type=Text, nullable=True)
    read_at: datetime | None = Field(
        default=None, sa_type=DateTime(timezone=True), nullable=True
    )
    replied_at: datetime | None = Field(
        default=None, sa_type=DateTime(timezone=True), nullable=True
    )
