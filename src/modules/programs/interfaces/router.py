"""Program public API routes."""

from fastapi import APIRouter, Depends, Query, Response

from src.core.domain.listing import RawListParams, normalize_list_params
from src.core.interfaces.http.caching import LIST_CACHE, apply_cache_policy
from src.core.interfaces.http.params import get_list_params
from src.core.interfaces.http.response import ApiResponse, PaginatedResponse
from src.modules.programs.application.dependencies import get_program_query_service
from src.modules.programs.application.models import (
    ProgramDetailData,
    ProgramSummaryData,
)
from src.modules.programs.application.services import ProgramQueryService
from src.modules.programs.domain.listing import (
    PROGRAM_LIST_POLICY,
    normalize_program_filters,
)
from src.modules.programs.interfaces.schemas import (
    ProgramDetailResponse,
    ProgramSummaryResponse,
)

router = APIRouter(prefix="/programs", tags=["programs"])


def _to_summary_response(program: ProgramSummaryData) -> ProgramSummaryResponse:
    return ProgramSummaryResponse.model_validate(program)


def _to_detail_response(program: ProgramDetailData) -> ProgramDetailResponse:
    return ProgramDetailResponse.model_validate(program)


@router.get(
    "",
    response_model=PaginatedResponse[ProgramSummaryResponse],
    summary="获取培训项目列表",
    description="仅返回已发布项目，支持分类、关键词、讲师、价格区间过滤及白名单字段排序",
)
async def list_programs(
    response: Response,
    params: RawListParams = Depends(get_list_params),
    instructor_id: str | None = Query(None, description="讲师ID"),
    min_price: str | None = Query(None, description="最低价格"),
    max_price: str | None = Query(None, description="最高价格"),
    service: ProgramQueryService = Depends(get_program_query_service),
) -> PaginatedResponse[ProgramSummaryResponse]:
    """List published programs."""
    query = normalize_list_params(params, PROGRAM_LIST_POLICY)
    filters = normalize_program_filters(instructor_id, min_price, max_price)
    result = await service.list_programs(query, filters)

    apply_cache_policy(response, LIST_CACHE)
    return PaginatedResponse.create(
        items=[_to_summary_response(item) for item in result.items],
        total=result.total,
        page=result.page,
        page_size=result.page_size,
    )


@router.get(
    "/{slug}",
    response_model=ApiResponse[ProgramDetailResponse],
    summary="获取培训项目详情",
    description="按 slug 获取已发布项目，包含分类、讲师和最近的开班排期，并累计浏览量",
)
async def get_program(
    slug: str,
    response: Response,
    service: ProgramQueryService = Depends(get_program_query_service),
) -> ApiResponse[ProgramDetailResponse]:
    """Get a program by slug."""
    program = await service.get_program(slug)
    apply_cache_policy(response, LIST_CACHE)
    return ApiResponse.ok(data=_to_detail_response(program))
