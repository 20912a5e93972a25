"""Taxonomy module application dependencies."""

from typing import NoReturn

from fastapi import Depends

from src.modules.taxonomy.application.services import TaxonomyQueryService
from src.modules.taxonomy.domain.repository import (
    PostCategoryRepository,
    ProgramCategoryRepository,
)


def _missing_dependency(name: str) -> NoReturn:
    raise RuntimeError(f"Missing dependency override for {name}")


async def get_program_category_repository() -> ProgramCategoryRepository:
    _missing_dependency("ProgramCategoryRepository")


async def get_post_category_repository() -> PostCategoryRepository:
    _missing_dependency("PostCategoryRepository")


async def get_taxonomy_query_service(
    program_category_repository: ProgramCategoryRepository = Depends(
        get_program_category_repository
    ),
    post_category_repository: PostCategoryRepository = Depends(
        get_post_category_repository
    ),
) -> TaxonomyQueryService:
    return TaxonomyQueryService(program_category_repository, post_category_repository)
