"""Application-level security dependencies.

Defines auth dependencies without importing infrastructure.
The actual implementations are injected via FastAPI dependency_overrides in main.py.
"""

from dataclasses import dataclass
from typing import NoReturn

ADMIN_ROLE = "admin"


def _missing_dependency(name: str) -> NoReturn:
    raise RuntimeError(f"Missing dependency override for {name}")


@dataclass(frozen=True)
class AdminContext:
    """Authenticated administrator for the current request."""

    user_id: str
    role: str
    email: str | None = None

    @property
    def numeric_user_id(self) -> int | None:
        """user_id as an int when the token subject is a numeric users.id."""
        return int(self.user_id) if self.user_id.isdigit() else None


async def get_current_admin() -> AdminContext:
    """Get the authenticated admin.

    This stub is overridden in main.py with the bearer-token implementation.
    """
    _missing_dependency("get_current_admin")
