"""Taxonomy application services."""

from src.modules.taxonomy.application.models import (
    CategoryRefData,
    PostCategoryData,
    ProgramCategoryData,
)
from src.modules.taxonomy.domain.entities import PostCategory, ProgramCategory
from src.modules.taxonomy.domain.repository import (
    PostCategoryRepository,
    ProgramCategoryRepository,
)


def build_category_ref(
    category: ProgramCategory | PostCategory | None,
) -> CategoryRefData | None:
    """Shape a joined category; a missing join yields None."""
    if category is None or category.id is None:
        return None
    return CategoryRefData(id=category.id, name=category.name, slug=category.slug)


class TaxonomyQueryService:
    """Category listings for navigation and filters."""

    def __init__(
        self,
        program_category_repository: ProgramCategoryRepository,
        post_category_repository: PostCategoryRepository,
    ) -> None:
        self.program_category_repo = program_category_repository
        self.post_category_repo = post_category_repository

    async def list_program_categories(self) -> list[ProgramCategoryData]:
        categories = await self.program_category_repo.list_ordered()
        return [
            ProgramCategoryData(
                id=category.id,
                name=category.name,
                slug=category.slug,
                description=category.description,
                parent_id=category.parent_id,
                display_order=category.display_order,
            )
            for category in categories
        ]

    async def list_post_categories(self) -> list[PostCategoryData]:
        categories = await self.post_category_repo.list_ordered()
        return [
            PostCategoryData(
                id=category.id,
                name=category.name,
                slug=category.slug,
                description=category.description,
            )
            for category in categories
        ]
