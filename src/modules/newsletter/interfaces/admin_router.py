"""Newsletter admin API routes."""

from fastapi import APIRouter, Depends, Query

from src.core.application.security import AdminContext, get_current_admin
from src.core.config import settings
from src.core.domain.listing import RawListParams, Visibility, normalize_list_params
from src.core.interfaces.http.response import ApiResponse, PaginatedResponse
from src.modules.newsletter.application.commands import DeleteSubscriberCommand
from src.modules.newsletter.application.dependencies import (
    get_delete_subscriber_handler,
    get_subscriber_query_service,
)
from src.modules.newsletter.application.handlers import DeleteSubscriberHandler
from src.modules.newsletter.application.services import SubscriberQueryService
from src.modules.newsletter.domain.listing import subscriber_list_policy
from src.modules.newsletter.interfaces.schemas import SubscriberResponse

router = APIRouter(prefix="/admin/newsletter", tags=["admin-newsletter"])


@router.get(
    "",
    response_model=PaginatedResponse[SubscriberResponse],
    summary="后台获取订阅者列表",
    description="默认按订阅时间倒序，可按 status 过滤、按邮箱或姓名搜索",
    dependencies=[Depends(get_current_admin)],
)
async def list_subscribers(
    page: str | None = Query(None, description="页码"),
    limit: str | None = Query(None, description="每页数量"),
    status: str | None = Query(None, description="状态过滤"),
    search: str | None = Query(None, description="关键词"),
    sort_by: str | None = Query(None, alias="sortBy", description="排序字段"),
    sort_order: str | None = Query(None, alias="sortOrder", description="asc / desc"),
    service: SubscriberQueryService = Depends(get_subscriber_query_service),
) -> PaginatedResponse[SubscriberResponse]:
    query = normalize_list_params(
        RawListParams(
            page=page,
            limit=limit,
            status=status,
            search=search,
            sort_by=sort_by,
            sort_order=sort_order,
        ),
        subscriber_list_policy(settings.ADMIN_PAGE_SIZE),
        Visibility.ANY,
    )
    result = await service.list_subscribers(query)
    return PaginatedResponse.create(
        items=[SubscriberResponse.model_validate(item) for item in result.items],
        total=result.total,
        page=result.page,
        page_size=result.page_size,
    )


@router.delete(
    "/{subscriber_id}",
    response_model=ApiResponse[dict[str, bool]],
    summary="删除订阅者",
)
async def delete_subscriber(
    subscriber_id: int,
    admin: AdminContext = Depends(get_current_admin),
    handler: DeleteSubscriberHandler = Depends(get_delete_subscriber_handler),
) -> ApiResponse[dict[str, bool]]:
    deleted = await handler.handle(
        DeleteSubscriberCommand(actor_id=admin.user_id, subscriber_id=subscriber_id)
    )
    return ApiResponse.ok(
        data={"deleted": deleted},
        message="Subscriber deleted successfully",
    )
