"""Contact application commands."""

from pydantic import BaseModel

from src.modules.contacts.domain.entities import ContactStatus


class SubmitContactCommand(BaseModel):
    """Public contact form submission."""

    name: str
    email: str
    phone: str | None = None
    subject: str | None = None
    message: str
    ip_address: str
    user_agent: str | None = None


class UpdateContactStatusCommand(BaseModel):
    actor_id: str
    contact_id: int
    status: ContactStatus


class DeleteContactCommand(BaseModel):
    actor_id: str
    contact_id: int
