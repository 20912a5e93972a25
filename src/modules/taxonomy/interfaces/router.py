"""Taxonomy API routes."""

from fastapi import APIRouter, Depends, Response

from src.core.interfaces.http.caching import TAXONOMY_CACHE, apply_cache_policy
from src.core.interfaces.http.response import ApiResponse
from src.modules.taxonomy.application.dependencies import get_taxonomy_query_service
from src.modules.taxonomy.application.services import TaxonomyQueryService
from src.modules.taxonomy.interfaces.schemas import (
    PostCategoryResponse,
    ProgramCategoryResponse,
)

router = APIRouter(tags=["taxonomy"])


@router.get(
    "/program-categories",
    response_model=ApiResponse[list[ProgramCategoryResponse]],
    summary="获取培训项目分类",
    description="按 display_order、名称排序返回全部项目分类",
)
async def list_program_categories(
    response: Response,
    service: TaxonomyQueryService = Depends(get_taxonomy_query_service),
) -> ApiResponse[list[ProgramCategoryResponse]]:
    """List program categories."""
    categories = await service.list_program_categories()
    apply_cache_policy(response, TAXONOMY_CACHE)
    return ApiResponse.ok(
        data=[ProgramCategoryResponse.model_validate(c) for c in categories]
    )


@router.get(
    "/post-categories",
    response_model=ApiResponse[list[PostCategoryResponse]],
    summary="获取文章分类",
    description="按名称排序返回全部文章分类",
)
async def list_post_categories(
    response: Response,
    service: TaxonomyQueryService = Depends(get_taxonomy_query_service),
) -> ApiResponse[list[PostCategoryResponse]]:
    """List post categories."""
    categories = await service.list_post_categories()
    apply_cache_policy(response, TAXONOMY_CACHE)
    return ApiResponse.ok(
        data=[PostCategoryResponse.model_validate(c) for c in categories]
    )
