"""Newsletter application commands."""

from pydantic import BaseModel


class SubscribeCommand(BaseModel):
    email: str
    name: str | None = None


class DeleteSubscriberCommand(BaseModel):
    actor_id: str
    subscriber_id: int
