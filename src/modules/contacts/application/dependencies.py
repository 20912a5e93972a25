"""Contact module application dependencies."""

from typing import NoReturn

from fastapi import Depends

from src.modules.contacts.application.handlers import (
    DeleteContactHandler,
    SubmitContactHandler,
    UpdateContactStatusHandler,
)
from src.modules.contacts.application.services import ContactQueryService
from src.modules.contacts.domain.repository import ContactRepository


def _missing_dependency(name: str) -> NoReturn:
    raise RuntimeError(f"Missing dependency override for {name}")


async def get_contact_repository() -> ContactRepository:
    _missing_dependency("ContactRepository")


async def get_contact_query_service(
    contact_repository: ContactRepository = Depends(get_contact_repository),
) -> ContactQueryService:
    return ContactQueryService(contact_repository)


async def get_submit_contact_handler(
    contact_repository: ContactRepository = Depends(get_contact_repository),
) -> SubmitContactHandler:
    return SubmitContactHandler(contact_repository)


async def get_update_contact_status_handler(
    contact_repository: ContactRepository = Depends(get_contact_repository),
) -> UpdateContactStatusHandler:
    return UpdateContactStatusHandler(contact_repository)


async def get_delete_contact_handler(
    contact_repository: ContactRepository = Depends(get_contact_repository),
) -> DeleteContactHandler:
    return DeleteContactHandler(contact_repository)
