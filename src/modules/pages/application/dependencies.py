"""Page module application dependencies."""

from typing import NoReturn

from fastapi import Depends

from src.modules.pages.application.services import PageQueryService
from src.modules.pages.domain.repository import PageRepository


def _missing_dependency(name: str) -> NoReturn:
    raise RuntimeError(f"Missing dependency override for {name}")


async def get_page_repository() -> PageRepository:
    _missing_dependency("PageRepository")


async def get_page_query_service(
    page_repository: PageRepository = Depends(get_page_repository),
) -> PageQueryService:
    return PageQueryService(page_repository)
