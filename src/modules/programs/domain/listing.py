"""Program list policy and program-specific filters."""

from dataclasses import dataclass

from src.core.domain.listing import ListPolicy, parse_int, parse_number
from src.modules.programs.domain.entities import ProgramStatus

PROGRAM_LIST_POLICY = ListPolicy(
    sort_fields={
        "id": "id",
        "title": "title",
        "price": "price",
        "created_at": "created_at",
        "createdAt": "created_at",
        "updated_at": "updated_at",
        "updatedAt": "updated_at",
        "views": "views",
    },
    default_sort="created_at",
    statuses=frozenset(s.value for s in ProgramStatus),
)


@dataclass(frozen=True)
class ProgramFilters:
    """Filters only programs support."""

    instructor_id: int | None = None
    min_price: float | None = None
    max_price: float | None = None


def normalize_program_filters(
    instructor_id: str | None = None,
    min_price: str | None = None,
    max_price: str | None = None,
) -> ProgramFilters:
    """Lenient parsing, same rules as the shared list parameters."""
    return ProgramFilters(
        instructor_id=parse_int(instructor_id),
        min_price=parse_number(min_price),
        max_price=parse_number(max_price),
    )
