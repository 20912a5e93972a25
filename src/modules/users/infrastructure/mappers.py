"""User entity-model mappers."""

from src.core.infrastructure.database.mapper import BaseMapper
from src.modules.users.domain.entities import User
from src.modules.users.infrastructure.models import UserModel


class UserMapper(BaseMapper[User, UserModel]):
    """User entity-model mapper."""

    def to_domain(self, model: UserModel) -> User:
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            avatar=model.avatar,
            role=model.role,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def to_model(self, entity: User) -> UserModel:
        return UserModel(
            id=entity.id,
            name=entity.name,
            email=entity.email,
            avatar=entity.avatar,
            role=entity.role,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
