"""Program command handlers."""

from loguru import logger

from src.core.domain.exceptions import InvalidReferenceError, ValidationError
from src.core.domain.slug import slugify
from src.core.infrastructure.logging import BusinessEvents
from src.modules.programs.application.commands import (
    CreateProgramCommand,
    DeleteProgramCommand,
    UpdateProgramCommand,
)
from src.modules.programs.domain.entities import Program
from src.modules.programs.domain.exceptions import (
    ProgramNotFoundError,
    ProgramSlugExistsError,
)
from src.modules.programs.domain.repository import (
    ProgramRepository,
    ScheduleRepository,
)


class CreateProgramHandler:
    """Handle program creation."""

    def __init__(self, program_repository: ProgramRepository):
        self.program_repository = program_repository
        self.logger = logger

    async def handle(self, command: CreateProgramCommand) -> Program:
        """Create a new program; slug defaults to the slugified title."""
        slug = command.slug or slugify(command.title)
        if not slug:
            raise ValidationError(
                "Slug could not be generated from title",
                fields=[{"field": "slug", "message": "Slug is required"}],
            )
        if await self.program_repository.exists_by_slug(slug):
            raise ProgramSlugExistsError(slug)

        missing = await self.program_repository.missing_references(
            category_id=command.category_id,
            instructor_id=command.instructor_id,
        )
        if missing:
            raise InvalidReferenceError(missing)

        program = Program(
            **command.model_dump(exclude={"actor_id", "slug"}),
            slug=slug,
        )
        created = await self.program_repository.create(program)
        self.logger.info(f"Created program: {created.title} ({created.slug})")
        BusinessEvents.content_saved(
            content_type="program",
            content_id=created.id,
            slug=created.slug,
            status=created.status.value,
            created=True,
            actor_id=command.actor_id,
        )
        return created


class UpdateProgramHandler:
    """Handle program update."""

    def __init__(self, program_repository: ProgramRepository):
        self.program_repository = program_repository
        self.logger = logger

    async def handle(self, command: UpdateProgramCommand) -> Program:
        """Apply a partial update, keeping slugs unique."""
        program = await self.program_repository.get_by_id(command.program_id)
        if not program:
            raise ProgramNotFoundError(program_id=command.program_id)

        changes = dict(command.changes)
        if "slug" in changes and not changes["slug"]:
            # 显式清空 slug 时按新标题重新生成
            changes["slug"] = slugify(changes.get("title") or program.title)
            if not changes["slug"]:
                raise ValidationError(
                    "Slug could not be generated from title",
                    fields=[{"field": "slug", "message": "Slug is required"}],
                )

        new_slug = changes.get("slug")
        if new_slug and new_slug != program.slug:
            if await self.program_repository.exists_by_slug(
                new_slug, exclude_id=program.id
            ):
                raise ProgramSlugExistsError(new_slug)

        missing = await self.program_repository.missing_references(
            category_id=changes.get("category_id"),
            instructor_id=changes.get("instructor_id"),
        )
        if missing:
            raise InvalidReferenceError(missing)

        program.apply_changes(changes)
        updated = await self.program_repository.update(program)
        self.logger.info(f"Updated program: {updated.slug}")
        BusinessEvents.content_saved(
            content_type="program",
            content_id=updated.id,
            slug=updated.slug,
            status=updated.status.value,
            created=False,
            actor_id=command.actor_id,
        )
        return updated


class DeleteProgramHandler:
    """Handle program deletion."""

    def __init__(
        self,
        program_repository: ProgramRepository,
        schedule_repository: ScheduleRepository,
    ):
        self.program_repository = program_repository
        self.schedule_repository = schedule_repository
        self.logger = logger

    async def handle(self, command: DeleteProgramCommand) -> bool:
        """Delete the program and its schedules."""
        program = await self.program_repository.get_by_id(command.program_id)
        if not program:
            raise ProgramNotFoundError(program_id=command.program_id)

        removed_schedules = await self.schedule_repository.delete_by_program(
            command.program_id
        )
        deleted = await self.program_repository.delete(command.program_id)
        self.logger.info(
            f"Deleted program {command.program_id} "
            f"with {removed_schedules} schedule(s)"
        )
        BusinessEvents.content_deleted(
            content_type="program",
            content_id=command.program_id,
            actor_id=command.actor_id,
        )
        return deleted
