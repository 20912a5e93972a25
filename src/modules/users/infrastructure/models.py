"""User database models."""

from sqlalchemy import Enum
from sqlmodel import Field

from src.core.infrastructure.database.base_model import BaseModel
from src.modules.users.domain.entities import UserRole


class UserModel(BaseModel, table=True):
    """User database model."""

    __tablename__ = "users"

    name: str = Field(nullable=False, max_length=255)
    email: str = Field(nullable=False, unique=True, index=True, max_length=255)
    avatar: str | None = Field(default=None, nullable=True, max_length=500)
    role: UserRole = Field(
        default=UserRole.USER,
        sa_type=Enum(
            UserRole,
            name="userrole",
            values_callable=lambda e: [i.value for i in e],
            create_constraint=False,
        ),
        nullable=False,
    )
