"""JWT token handling.

令牌由外部认证服务签发，本服务只负责校验签名、过期时间和 admin 角色。
"""

from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from loguru import logger
from pydantic import BaseModel, Field

from src.core.application.security import ADMIN_ROLE, AdminContext
from src.core.config import settings

security = HTTPBearer(auto_error=False)


class TokenPayload(BaseModel):
    """JWT Token Payload 结构。"""

    sub: str = Field(..., description="Subject (用户ID)")
    exp: int = Field(..., description="过期时间戳", gt=0)
    role: str | None = Field(None, description="用户角色")
    email: str | None = Field(None, description="用户邮箱")

    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE


def create_access_token(
    subject: str | Any,
    expires_delta: timedelta | None = None,
    extra_claims: dict | None = None,
) -> str:
    """Create a JWT access token."""
    if expires_delta:
        expire = datetime.now(UTC) + expires_delta
    else:
        expire = datetime.now(UTC) + timedelta(
            minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES
        )

    to_encode = {"exp": expire, "sub": str(subject)}
    if extra_claims:
        to_encode.update(extra_claims)

    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> TokenPayload:
    """Decode and validate a JWT token.

    Raises:
        HTTPException: Token 过期或无效
    """
    try:
        payload = jwt.decode(
            token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM]
        )
        return TokenPayload(
            sub=str(payload.get("sub", "")),
            exp=payload.get("exp", 0),
            role=payload.get("role"),
            email=payload.get("email"),
        )
    except jwt.ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired",
        )
    except jwt.InvalidTokenError as e:
        logger.warning(f"Invalid token: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
        )


async def get_current_admin(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> AdminContext:
    """Resolve the admin from the bearer token.

    Raises:
        HTTPException: 401 缺少或无效 token；403 非 admin 角色
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = decode_token(credentials.credentials)
    if not payload.sub:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload",
        )
    if not payload.is_admin():
        logger.warning(f"Non-admin subject {payload.sub} tried to access admin API")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin role required",
        )

    return AdminContext(user_id=payload.sub, role=payload.role or "", email=payload.email)
