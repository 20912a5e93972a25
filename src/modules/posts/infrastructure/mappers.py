"""Post entity-model mapper."""

from src.core.infrastructure.database.mapper import BaseMapper
from src.modules.posts.domain.entities import Post
from src.modules.posts.infrastructure.models import PostModel


class PostMapper(BaseMapper[Post, PostModel]):
    """Post entity-model mapper."""

    def to_domain(self, model: PostModel) -> Post:
        return Post(
            id=model.id,
            title=model.title,
            slug=model.slug,
            excerpt=model.excerpt,
            content=model.content,
            featured_image=model.featured_image,
            category_id=model.category_id,
            author_id=model.author_id,
            status=model.status,
            views=model.views,
            published_at=model.published_at,
            meta_title=model.meta_title,
            meta_description=model.meta_description,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def to_model(self, entity: Post) -> PostModel:
        return PostModel(
            id=entity.id,
            title=entity.title,
            slug=entity.slug,
            excerpt=entity.excerpt,
            content=entity.content,
            featured_image=entity.featured_image,
            category_id=entity.category_id,
            author_id=entity.author_id,
            status=entity.status,
            views=entity.views,
            published_at=entity.published_at,
            meta_title=entity.meta_title,
            meta_description=entity.meta_description,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
