"""Page domain exceptions."""

from src.core.domain.exceptions import EntityNotFoundError


class PageNotFoundError(EntityNotFoundError):
    def __init__(self, slug: str):
        super().__init__("Page", slug, field="slug")
