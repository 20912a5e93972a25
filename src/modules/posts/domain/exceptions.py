"""Post domain exceptions."""

from src.core.domain.exceptions import DuplicateEntityError, EntityNotFoundError


class PostNotFoundError(EntityNotFoundError):
    """Raised when post is not found."""

    def __init__(self, post_id: int | None = None, slug: str | None = None):
        if slug:
            super().__init__("Post", slug, field="slug")
        else:
            super().__init__("Post", post_id)


class PostSlugExistsError(DuplicateEntityError):
    def __init__(self, slug: str):
        super().__init__("Post", "slug", slug)
