"""Post public API routes."""

from fastapi import APIRouter, Depends, Response

from src.core.domain.listing import RawListParams, normalize_list_params
from src.core.interfaces.http.caching import LIST_CACHE, apply_cache_policy
from src.core.interfaces.http.params import get_list_params
from src.core.interfaces.http.response import ApiResponse, PaginatedResponse
from src.modules.posts.application.dependencies import get_post_query_service
from src.modules.posts.application.services import PostQueryService
from src.modules.posts.domain.listing import POST_LIST_POLICY
from src.modules.posts.interfaces.schemas import (
    PostDetailResponse,
    PostSummaryResponse,
)

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get(
    "",
    response_model=PaginatedResponse[PostSummaryResponse],
    summary="获取文章列表",
    description="仅返回已发布且发布时间不晚于当前的文章，默认按发布时间倒序",
)
async def list_posts(
    response: Response,
    params: RawListParams = Depends(get_list_params),
    service: PostQueryService = Depends(get_post_query_service),
) -> PaginatedResponse[PostSummaryResponse]:
    """List published posts."""
    query = normalize_list_params(params, POST_LIST_POLICY)
    result = await service.list_posts(query)

    apply_cache_policy(response, LIST_CACHE)
    return PaginatedResponse.create(
        items=[PostSummaryResponse.model_validate(item) for item in result.items],
        total=result.total,
        page=result.page,
        page_size=result.page_size,
    )


@router.get(
    "/{slug}",
    response_model=ApiResponse[PostDetailResponse],
    summary="获取文章详情",
    description="按 slug 获取文章，附带同分类的相关文章，并累计浏览量",
)
async def get_post(
    slug: str,
    response: Response,
    service: PostQueryService = Depends(get_post_query_service),
) -> ApiResponse[PostDetailResponse]:
    post = await service.get_post(slug)
    apply_cache_policy(response, LIST_CACHE)
    return ApiResponse.ok(data=PostDetailResponse.model_validate(post))
