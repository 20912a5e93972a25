"""培训项目后台命令处理器单元测试。"""

from decimal import Decimal

import pytest

from src.core.domain.exceptions import DuplicateEntityError, ValidationError
from src.modules.programs.application.commands import (
    CreateProgramCommand,
    DeleteProgramCommand,
    UpdateProgramCommand,
)
from src.modules.programs.application.handlers import (
    CreateProgramHandler,
    DeleteProgramHandler,
    UpdateProgramHandler,
)
from src.modules.programs.domain.entities import ProgramStatus, Schedule
from src.modules.programs.domain.exceptions import ProgramNotFoundError
from tests.unit.fakes import BASE_TIME, _FakeProgramRepo, _FakeScheduleRepo, make_program

pytestmark = pytest.mark.anyio


@pytest.fixture
def program_repo() -> _FakeProgramRepo:
    return _FakeProgramRepo(
        [
            make_program(1, title="Public Speaking", slug="public-speaking", views=7),
            make_program(2, title="Negotiation", slug="negotiation"),
        ]
    )


class TestCreateProgram:
    async def test_slug_generated_from_title(self, program_repo):
        handler = CreateProgramHandler(program_repo)

        program = await handler.handle(
            CreateProgramCommand(
                actor_id="1",
                title="Leadership & Management 101",
                price=Decimal("2500000"),
                status=ProgramStatus.PUBLISHED,
            )
        )

        assert program.id == 3
        assert program.slug == "leadership-management-101"
        assert program.views == 0
        assert program_repo.items[3].status == ProgramStatus.PUBLISHED

    async def test_duplicate_slug(self, program_repo):
        handler = CreateProgramHandler(program_repo)

        with pytest.raises(DuplicateEntityError):
            await handler.handle(
                CreateProgramCommand(actor_id="1", title="Public Speaking")
            )

    async def test_title_without_slug_characters(self, program_repo):
        handler = CreateProgramHandler(program_repo)

        with pytest.raises(ValidationError) as exc_info:
            await handler.handle(CreateProgramCommand(actor_id="1", title="项目管理"))
        assert exc_info.value.fields[0]["field"] == "slug"


class TestUpdateProgram:
    async def test_partial_update_keeps_views(self, program_repo):
        handler = UpdateProgramHandler(program_repo)

        updated = await handler.handle(
            UpdateProgramCommand(
                actor_id="1",
                program_id=1,
                changes={"price": "1500000.00", "views": 0, "status": "archived"},
            )
        )

        assert updated.price == Decimal("1500000.00")
        assert updated.status == ProgramStatus.ARCHIVED
        assert updated.views == 7
        assert updated.title == "Public Speaking"

    async def test_slug_conflict(self, program_repo):
        handler = UpdateProgramHandler(program_repo)

        with pytest.raises(DuplicateEntityError):
            await handler.handle(
                UpdateProgramCommand(
                    actor_id="1", program_id=1, changes={"slug": "negotiation"}
                )
            )

    async def test_empty_slug_regenerated(self, program_repo):
        handler = UpdateProgramHandler(program_repo)

        updated = await handler.handle(
            UpdateProgramCommand(
                actor_id="1",
                program_id=2,
                changes={"slug": "", "title": "Advanced Negotiation"},
            )
        )

        assert updated.slug == "advanced-negotiation"

    async def test_missing_program(self, program_repo):
        handler = UpdateProgramHandler(program_repo)

        with pytest.raises(ProgramNotFoundError):
            await handler.handle(
                UpdateProgramCommand(actor_id="1", program_id=404, changes={})
            )


class TestDeleteProgram:
    async def test_schedules_removed_first(self, program_repo):
        schedule_repo = _FakeScheduleRepo(
            [
                Schedule(id=1, program_id=1, start_date=BASE_TIME, end_date=BASE_TIME),
                Schedule(id=2, program_id=2, start_date=BASE_TIME, end_date=BASE_TIME),
            ]
        )
        handler = DeleteProgramHandler(program_repo, schedule_repo)

        deleted = await handler.handle(DeleteProgramCommand(actor_id="1", program_id=1))

        assert deleted is True
        assert 1 not in program_repo.items
        assert [s.program_id for s in schedule_repo.schedules] == [2]

    async def test_missing_program(self, program_repo):
        handler = DeleteProgramHandler(program_repo, _FakeScheduleRepo())

        with pytest.raises(ProgramNotFoundError):
            await handler.handle(DeleteProgramCommand(actor_id="1", program_id=404))
