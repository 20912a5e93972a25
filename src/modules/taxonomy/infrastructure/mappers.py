"""Taxonomy entity-model mappers."""

from src.core.infrastructure.database.mapper import BaseMapper
from src.modules.taxonomy.domain.entities import PostCategory, ProgramCategory
from src.modules.taxonomy.infrastructure.models import (
    PostCategoryModel,
    ProgramCategoryModel,
)


class ProgramCategoryMapper(BaseMapper[ProgramCategory, ProgramCategoryModel]):
    """Program category entity-model mapper."""

    def to_domain(self, model: ProgramCategoryModel) -> ProgramCategory:
        return ProgramCategory(
            id=model.id,
            name=model.name,
            slug=model.slug,
            description=model.description,
            parent_id=model.parent_id,
            display_order=model.display_order,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def to_model(self, entity: ProgramCategory) -> ProgramCategoryModel:
        return ProgramCategoryModel(
            id=entity.id,
            name=entity.name,
            slug=entity.slug,
            description=entity.description,
            parent_id=entity.parent_id,
            display_order=entity.display_order,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )


class PostCategoryMapper(BaseMapper[PostCategory, PostCategoryModel]):
    """Post category entity-model mapper."""

    def to_domain(self, model: PostCategoryModel) -> PostCategory:
        return PostCategory(
            id=model.id,
            name=model.name,
            slug=model.slug,
            description=model.description,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def to_model(self, entity: PostCategory) -> PostCategoryModel:
        return PostCategoryModel(
            id=entity.id,
            name=entity.name,
            slug=entity.slug,
            description=entity.description,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
