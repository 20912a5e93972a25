"""Program domain exceptions."""

from src.core.domain.exceptions import DuplicateEntityError, EntityNotFoundError


class ProgramNotFoundError(EntityNotFoundError):
    """Raised when program is not found."""

    def __init__(self, program_id: int | None = None, slug: str | None = None):
        if slug:
            super().__init__("Program", slug, field="slug")
        else:
            super().__init__("Program", program_id)


class ProgramSlugExistsError(DuplicateEntityError):
    """Raised when another program already uses the slug."""

    def __init__(self, slug: str):
        super().__init__("Program", "slug", slug)
