"""Contact domain exceptions."""

from src.core.domain.exceptions import EntityNotFoundError


class ContactNotFoundError(EntityNotFoundError):
    def __init__(self, contact_id: int):
        super().__init__("Contact", contact_id)
