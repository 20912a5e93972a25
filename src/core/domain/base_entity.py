"""Base entity class for all domain entities."""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def _utc_now() -> datetime:
    return datetime.now(UTC)


class BaseEntity(BaseModel):
    """Base entity class for all domain entities.

    id 为数据库自增主键，新建实体在持久化之前为 None。
    """

    id: int | None = Field(default=None)
    created_at: datetime = Field(default_factory=_utc_now)
    updated_at: datetime = Field(default_factory=_utc_now)

    model_config = ConfigDict(
        from_attributes=True,
        validate_assignment=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    def _update_timestamp(self) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = _utc_now()

    def __eq__(self, other: Any) -> bool:
        """Entities are equal if their IDs are equal."""
        if not isinstance(other, BaseEntity):
            return NotImplemented
        return bool(self.id and other.id and self.id == other.id)

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        return hash(self.id) if self.id else super().__hash__()
