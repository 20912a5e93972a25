"""Program module application dependencies."""

from typing import NoReturn

from fastapi import Depends

from src.core.config import settings
from src.modules.programs.application.handlers import (
    CreateProgramHandler,
    DeleteProgramHandler,
    UpdateProgramHandler,
)
from src.modules.programs.application.services import ProgramQueryService
from src.modules.programs.domain.repository import (
    ProgramRepository,
    ScheduleRepository,
)


def _missing_dependency(name: str) -> NoReturn:
    raise RuntimeError(f"Missing dependency override for {name}")


async def get_program_repository() -> ProgramRepository:
    _missing_dependency("ProgramRepository")


async def get_schedule_repository() -> ScheduleRepository:
    _missing_dependency("ScheduleRepository")


async def get_program_query_service(
    program_repository: ProgramRepository = Depends(get_program_repository),
    schedule_repository: ScheduleRepository = Depends(get_schedule_repository),
) -> ProgramQueryService:
    return ProgramQueryService(
        program_repository,
        schedule_repository,
        schedules_limit=settings.SCHEDULES_PREVIEW_LIMIT,
    )


async def get_create_program_handler(
    program_repository: ProgramRepository = Depends(get_program_repository),
) -> CreateProgramHandler:
    return CreateProgramHandler(program_repository)


async def get_update_program_handler(
    program_repository: ProgramRepository = Depends(get_program_repository),
) -> UpdateProgramHandler:
    return UpdateProgramHandler(program_repository)


async def get_delete_program_handler(
    program_repository: ProgramRepository = Depends(get_program_repository),
    schedule_repository: ScheduleRepository = Depends(get_schedule_repository),
) -> DeleteProgramHandler:
    return DeleteProgramHandler(program_repository, schedule_repository)
