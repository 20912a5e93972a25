"""Program module dependencies."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.infrastructure.database.session import get_db_session
from src.modules.programs.infrastructure.mappers import ProgramMapper, ScheduleMapper
from src.modules.programs.infrastructure.repositories import (
    PostgreSQLProgramRepository,
    PostgreSQLScheduleRepository,
)


def get_program_mapper() -> ProgramMapper:
    return ProgramMapper()


def get_schedule_mapper() -> ScheduleMapper:
    return ScheduleMapper()


async def get_program_repository(
    session: AsyncSession = Depends(get_db_session),
    mapper: ProgramMapper = Depends(get_program_mapper),
) -> PostgreSQLProgramRepository:
    return PostgreSQLProgramRepository(session, mapper)


async def get_schedule_repository(
    session: AsyncSession = Depends(get_db_session),
    mapper: ScheduleMapper = Depends(get_schedule_mapper),
) -> PostgreSQLScheduleRepository:
    return PostgreSQLScheduleRepository(session, mapper)
