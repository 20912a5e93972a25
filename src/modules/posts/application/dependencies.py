"""Post module application dependencies."""

from typing import NoReturn

from fastapi import Depends

from src.core.config import settings
from src.modules.posts.application.handlers import (
    CreatePostHandler,
    DeletePostHandler,
    UpdatePostHandler,
)
from src.modules.posts.application.services import PostQueryService
from src.modules.posts.domain.repository import PostRepository


def _missing_dependency(name: str) -> NoReturn:
    raise RuntimeError(f"Missing dependency override for {name}")


async def get_post_repository() -> PostRepository:
    _missing_dependency("PostRepository")


async def get_post_query_service(
    post_repository: PostRepository = Depends(get_post_repository),
) -> PostQueryService:
    return PostQueryService(
        post_repository, related_limit=settings.RELATED_POSTS_LIMIT
    )


async def get_create_post_handler(
    post_repository: PostRepository = Depends(get_post_repository),
) -> CreatePostHandler:
    return CreatePostHandler(post_repository)


async def get_update_post_handler(
    post_repository: PostRepository = Depends(get_post_repository),
) -> UpdatePostHandler:
    return UpdatePostHandler(post_repository)


async def get_delete_post_handler(
    post_repository: PostRepository = Depends(get_post_repository),
) -> DeletePostHandler:
    return DeletePostHandler(post_repository)
