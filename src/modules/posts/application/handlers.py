"""Post command handlers."""

from loguru import logger

from src.core.domain.exceptions import InvalidReferenceError, ValidationError
from src.core.domain.slug import slugify
from src.core.infrastructure.logging import BusinessEvents
from src.modules.posts.application.commands import (
    CreatePostCommand,
    DeletePostCommand,
    UpdatePostCommand,
)
from src.modules.posts.domain.entities import Post
from src.modules.posts.domain.exceptions import PostNotFoundError, PostSlugExistsError
from src.modules.posts.domain.repository import PostRepository


def _slug_from_title(title: str) -> str:
    slug = slugify(title)
    if not slug:
        raise ValidationError(
            "Slug could not be generated from title",
            fields=[{"field": "slug", "message": "Slug is required"}],
        )
    return slug


class CreatePostHandler:
    """Handle post creation."""

    def __init__(self, post_repository: PostRepository):
        self.post_repository = post_repository
        self.logger = logger

    async def handle(self, command: CreatePostCommand) -> Post:
        slug = command.slug or _slug_from_title(command.title)
        if await self.post_repository.exists_by_slug(slug):
            raise PostSlugExistsError(slug)

        missing = await self.post_repository.missing_references(
            category_id=command.category_id
        )
        if missing:
            raise InvalidReferenceError(missing)

        author_id = command.author_id
        if author_id is not None and not await self.post_repository.author_exists(
            author_id
        ):
            # 令牌里的用户在本库没有对应记录时，文章不关联作者
            self.logger.warning(
                f"Author {author_id} not found, saving post without author"
            )
            author_id = None

        post = Post(
            **command.model_dump(exclude={"actor_id", "slug", "author_id"}),
            slug=slug,
            author_id=author_id,
        )
        post.stamp_publication()
        created = await self.post_repository.create(post)
        self.logger.info(f"Created post: {created.title} ({created.slug})")
        BusinessEvents.content_saved(
            content_type="post",
            content_id=created.id,
            slug=created.slug,
            status=created.status.value,
            created=True,
            actor_id=command.actor_id,
        )
        return created


class UpdatePostHandler:
    """Handle post update."""

    def __init__(self, post_repository: PostRepository):
        self.post_repository = post_repository
        self.logger = logger

    async def handle(self, command: UpdatePostCommand) -> Post:
        post = await self.post_repository.get_by_id(command.post_id)
        if not post:
            raise PostNotFoundError(post_id=command.post_id)

        changes = dict(command.changes)
        if "slug" in changes and not changes["slug"]:
            changes["slug"] = _slug_from_title(changes.get("title") or post.title)

        new_slug = changes.get("slug")
        if new_slug and new_slug != post.slug:
            if await self.post_repository.exists_by_slug(new_slug, exclude_id=post.id):
                raise PostSlugExistsError(new_slug)

        missing = await self.post_repository.missing_references(
            category_id=changes.get("category_id")
        )
        if missing:
            raise InvalidReferenceError(missing)

        post.apply_changes(changes)
        updated = await self.post_repository.update(post)
        self.logger.info(f"Updated post: {updated.slug}")
        BusinessEvents.content_saved(
            content_type="post",
            content_id=updated.id,
            slug=updated.slug,
            status=updated.status.value,
            created=False,
            actor_id=command.actor_id,
        )
        return updated


class DeletePostHandler:
    """Handle post deletion."""

    def __init__(self, post_repository: PostRepository):
        self.post_repository = post_repository
        self.logger = logger

    async def handle(self, command: DeletePostCommand) -> bool:
        deleted = await self.post_repository.delete(command.post_id)
        if not deleted:
            raise PostNotFoundError(post_id=command.post_id)
        self.logger.info(f"Deleted post {command.post_id}")
        BusinessEvents.content_deleted(
            content_type="post",
            content_id=command.post_id,
            actor_id=command.actor_id,
        )
        return deleted
