"""Contact application data models."""

from datetime import datetime

from pydantic import BaseModel

from src.modules.contacts.domain.entities import ContactStatus


class ContactData(BaseModel):
    """Contact message as shown in the admin inbox."""

    id: int
    name: str
    email: str
    phone: str | None = None
    subject: str | None = None
    message: str
    status: ContactStatus
    ip_address: str | None = None
    user_agent: str | None = None
    read_at: datetime | None = None
    replied_at: datetime | None = None
    created_at: datetime


class ContactListData(BaseModel):
    items: list[ContactData]
    total: int
    page: int
    page_size: int
    total_pages: int
