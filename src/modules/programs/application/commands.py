"""Program application commands."""

from decimal import Decimal

from pydantic import BaseModel

from src.modules.programs.domain.entities import ProgramStatus


class CreateProgramCommand(BaseModel):
    """Create a new program."""

    actor_id: str
    title: str
    slug: str | None = None
    category_id: int | None = None
    instructor_id: int | None = None
    description: str | None = None
    content: str | None = None
    image: str | None = None
    duration: str | None = None
    price: Decimal = Decimal("0")
    max_participants: int | None = None
    requirements: str | None = None
    benefits: list[str] = []
    certificate: bool = False
    status: ProgramStatus = ProgramStatus.DRAFT
    meta_title: str | None = None
    meta_description: str | None = None


class UpdateProgramCommand(BaseModel):
    """Partially update a program.

    changes 只包含请求中显式提供的字段。
    """

    actor_id: str
    program_id: int
    changes: dict


class DeleteProgramCommand(BaseModel):
    """Delete a program and its schedules."""

    actor_id: str
    program_id: int
