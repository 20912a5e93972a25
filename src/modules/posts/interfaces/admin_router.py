"""Post admin API routes."""

from fastapi import APIRouter, Depends, status

from src.core.application.security import AdminContext, get_current_admin
from src.core.domain.listing import RawListParams, Visibility, normalize_list_params
from src.core.interfaces.http.params import get_list_params
from src.core.interfaces.http.response import ApiResponse, PaginatedResponse
from src.modules.posts.application.commands import (
    CreatePostCommand,
    DeletePostCommand,
    UpdatePostCommand,
)
from src.modules.posts.application.dependencies import (
    get_create_post_handler,
    get_delete_post_handler,
    get_post_query_service,
    get_update_post_handler,
)
from src.modules.posts.application.handlers import (
    CreatePostHandler,
    DeletePostHandler,
    UpdatePostHandler,
)
from src.modules.posts.application.services import PostQueryService
from src.modules.posts.domain.entities import PostStatus
from src.modules.posts.domain.listing import POST_LIST_POLICY
from src.modules.posts.interfaces.schemas import (
    CreatePostRequest,
    PostDetailResponse,
    PostSummaryResponse,
    UpdatePostRequest,
)

router = APIRouter(prefix="/admin/posts", tags=["admin-posts"])


@router.get(
    "",
    response_model=PaginatedResponse[PostSummaryResponse],
    summary="后台获取文章列表",
    description="返回所有状态的文章，包括定时发布的文章，可按 status 过滤",
    dependencies=[Depends(get_current_admin)],
)
async def list_posts(
    params: RawListParams = Depends(get_list_params),
    service: PostQueryService = Depends(get_post_query_service),
) -> PaginatedResponse[PostSummaryResponse]:
    query = normalize_list_params(params, POST_LIST_POLICY, Visibility.ANY)
    result = await service.list_posts(query)
    return PaginatedResponse.create(
        items=[PostSummaryResponse.model_validate(item) for item in result.items],
        total=result.total,
        page=result.page,
        page_size=result.page_size,
    )


@router.get(
    "/{post_id}",
    response_model=ApiResponse[PostDetailResponse],
    summary="后台获取文章详情",
    dependencies=[Depends(get_current_admin)],
)
async def get_post(
    post_id: int,
    service: PostQueryService = Depends(get_post_query_service),
) -> ApiResponse[PostDetailResponse]:
    post = await service.get_post_by_id(post_id)
    return ApiResponse.ok(data=PostDetailResponse.model_validate(post))


@router.post(
    "",
    response_model=ApiResponse[PostDetailResponse],
    status_code=status.HTTP_201_CREATED,
    summary="创建文章",
    description="作者为当前管理员；slug 缺省时由标题自动生成",
)
async def create_post(
    request: CreatePostRequest,
    admin: AdminContext = Depends(get_current_admin),
    handler: CreatePostHandler = Depends(get_create_post_handler),
    query_service: PostQueryService = Depends(get_post_query_service),
) -> ApiResponse[PostDetailResponse]:
    """Create a post authored by the current admin."""
    command = CreatePostCommand(
        actor_id=admin.user_id,
        author_id=admin.numeric_user_id,
        status=PostStatus(request.status.value),
        **request.model_dump(exclude={"status"}),
    )
    post = await handler.handle(command)

    return ApiResponse.ok(
        data=PostDetailResponse.model_validate(
            await query_service.get_post_by_id(post.id)
        ),
        message="Post created successfully",
    )


@router.put(
    "/{post_id}",
    response_model=ApiResponse[PostDetailResponse],
    summary="更新文章",
)
async def update_post(
    post_id: int,
    request: UpdatePostRequest,
    admin: AdminContext = Depends(get_current_admin),
    handler: UpdatePostHandler = Depends(get_update_post_handler),
    query_service: PostQueryService = Depends(get_post_query_service),
) -> ApiResponse[PostDetailResponse]:
    command = UpdatePostCommand(
        actor_id=admin.user_id,
        post_id=post_id,
        changes=request.to_changes(),
    )
    post = await handler.handle(command)

    return ApiResponse.ok(
        data=PostDetailResponse.model_validate(
            await query_service.get_post_by_id(post.id)
        ),
        message="Post updated successfully",
    )


@router.delete(
    "/{post_id}",
    response_model=ApiResponse[dict[str, bool]],
    summary="删除文章",
)
async def delete_post(
    post_id: int,
    admin: AdminContext = Depends(get_current_admin),
    handler: DeletePostHandler = Depends(get_delete_post_handler),
) -> ApiResponse[dict[str, bool]]:
    deleted = await handler.handle(
        DeletePostCommand(actor_id=admin.user_id, post_id=post_id)
    )
    return ApiResponse.ok(data={"deleted": deleted}, message="Post deleted successfully")
