"""Page public API routes."""

from fastapi import APIRouter, Depends, Response

from src.core.interfaces.http.caching import TAXONOMY_CACHE, apply_cache_policy
from src.core.interfaces.http.response import ApiResponse
from src.modules.pages.application.dependencies import get_page_query_service
from src.modules.pages.application.services import PageQueryService
from src.modules.pages.interfaces.schemas import PageResponse

router = APIRouter(prefix="/pages", tags=["pages"])


@router.get(
    "/{slug}",
    response_model=ApiResponse[PageResponse],
    summary="获取静态页面",
)
async def get_page(
    slug: str,
    response: Response,
    service: PageQueryService = Depends(get_page_query_service),
) -> ApiResponse[PageResponse]:
    page = await service.get_page(slug)
    # 静态页面很少变化，与分类使用同一缓存策略
    apply_cache_policy(response, TAXONOMY_CACHE)
    return ApiResponse.ok(data=PageResponse.model_validate(page))
