"""Contact admin API routes."""

from fastapi import APIRouter, Depends, Query

from src.core.application.security import AdminContext, get_current_admin
from src.core.config import settings
from src.core.domain.listing import RawListParams, Visibility, normalize_list_params
from src.core.interfaces.http.response import ApiResponse, PaginatedResponse
from src.modules.contacts.application.commands import (
    DeleteContactCommand,
    UpdateContactStatusCommand,
)
from src.modules.contacts.application.dependencies import (
    get_contact_query_service,
    get_delete_contact_handler,
    get_update_contact_status_handler,
)
from src.modules.contacts.application.handlers import (
    DeleteContactHandler,
    UpdateContactStatusHandler,
)
from src.modules.contacts.application.services import (
    ContactQueryService,
    build_contact_data,
)
from src.modules.contacts.domain.entities import ContactStatus
from src.modules.contacts.domain.listing import contact_list_policy
from src.modules.contacts.interfaces.schemas import (
    ContactResponse,
    UpdateContactStatusRequest,
)

router = APIRouter(prefix="/admin/contacts", tags=["admin-contacts"])


@router.get(
    "",
    response_model=PaginatedResponse[ContactResponse],
    summary="后台获取联系留言",
    description="按提交时间倒序，可按 status 过滤",
    dependencies=[Depends(get_current_admin)],
)
async def list_contacts(
    page: str | None = Query(None, description="页码"),
    limit: str | None = Query(None, description="每页数量"),
    status: str | None = Query(None, description="状态过滤"),
    search: str | None = Query(None, description="关键词"),
    service: ContactQueryService = Depends(get_contact_query_service),
) -> PaginatedResponse[ContactResponse]:
    query = normalize_list_params(
        RawListParams(page=page, limit=limit, status=status, search=search),
        contact_list_policy(settings.ADMIN_PAGE_SIZE),
        Visibility.ANY,
    )
    result = await service.list_contacts(query)
    return PaginatedResponse.create(
        items=[ContactResponse.model_validate(item) for item in result.items],
        total=result.total,
        page=result.page,
        page_size=result.page_size,
    )


@router.patch(
    "/{contact_id}",
    response_model=ApiResponse[ContactResponse],
    summary="更新留言状态",
)
async def update_contact_status(
    contact_id: int,
    request: UpdateContactStatusRequest,
    admin: AdminContext = Depends(get_current_admin),
    handler: UpdateContactStatusHandler = Depends(get_update_contact_status_handler),
) -> ApiResponse[ContactResponse]:
    contact = await handler.handle(
        UpdateContactStatusCommand(
            actor_id=admin.user_id,
            contact_id=contact_id,
            status=ContactStatus(request.status.value),
        )
    )
    return ApiResponse.ok(
        data=ContactResponse.model_validate(build_contact_data(contact))
    )


@router.delete(
    "/{contact_id}",
    response_model=ApiResponse[dict[str, bool]],
    summary="删除留言",
)
async def delete_contact(
    contact_id: int,
    admin: AdminContext = Depends(get_current_admin),
    handler: DeleteContactHandler = Depends(get_delete_contact_handler),
) -> ApiResponse[dict[str, bool]]:
    deleted = await handler.handle(
        DeleteContactCommand(actor_id=admin.user_id, contact_id=contact_id)
    )
    return ApiResponse.ok(
        data={"deleted": deleted},
        message="Contact deleted successfully",
    )
