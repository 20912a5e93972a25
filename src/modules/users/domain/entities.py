"""User domain entities.

用户账号由外部认证服务管理，这里只保留作为文章作者展示所需的字段。
"""

from enum import Enum

from pydantic import Field

from src.core.domain.base_entity import BaseEntity


class UserRole(str, Enum):
    """User role enum."""

    ADMIN = "admin"
    EDITOR = "editor"
    USER = "user"


class User(BaseEntity):
    """User entity (post author)."""

    name: str = Field(..., description="显示名称")
    email: str = Field(..., description="邮箱")
    avatar: str | None = Field(default=None, description="头像 URL")
    role: UserRole = Field(default=UserRole.USER, description="角色")
