"""Program admin API routes."""

from fastapi import APIRouter, Depends, Query, status

from src.core.application.security import AdminContext, get_current_admin
from src.core.domain.listing import RawListParams, Visibility, normalize_list_params
from src.core.interfaces.http.params import get_list_params
from src.core.interfaces.http.response import ApiResponse, PaginatedResponse
from src.modules.programs.application.commands import (
    CreateProgramCommand,
    DeleteProgramCommand,
    UpdateProgramCommand,
)
from src.modules.programs.application.dependencies import (
    get_create_program_handler,
    get_delete_program_handler,
    get_program_query_service,
    get_update_program_handler,
)
from src.modules.programs.application.handlers import (
    CreateProgramHandler,
    DeleteProgramHandler,
    UpdateProgramHandler,
)
from src.modules.programs.application.services import ProgramQueryService
from src.modules.programs.domain.entities import ProgramStatus
from src.modules.programs.domain.listing import (
    PROGRAM_LIST_POLICY,
    normalize_program_filters,
)
from src.modules.programs.interfaces.schemas import (
    CreateProgramRequest,
    ProgramDetailResponse,
    ProgramSummaryResponse,
    UpdateProgramRequest,
)

router = APIRouter(prefix="/admin/programs", tags=["admin-programs"])


@router.get(
    "",
    response_model=PaginatedResponse[ProgramSummaryResponse],
    summary="后台获取培训项目列表",
    description="返回所有状态的项目，可按 status 过滤",
    dependencies=[Depends(get_current_admin)],
)
async def list_programs(
    params: RawListParams = Depends(get_list_params),
    instructor_id: str | None = Query(None, description="讲师ID"),
    service: ProgramQueryService = Depends(get_program_query_service),
) -> PaginatedResponse[ProgramSummaryResponse]:
    """List programs of any status."""
    query = normalize_list_params(params, PROGRAM_LIST_POLICY, Visibility.ANY)
    filters = normalize_program_filters(instructor_id=instructor_id)
    result = await service.list_programs(query, filters)
    return PaginatedResponse.create(
        items=[ProgramSummaryResponse.model_validate(item) for item in result.items],
        total=result.total,
        page=result.page,
        page_size=result.page_size,
    )


@router.get(
    "/{program_id}",
    response_model=ApiResponse[ProgramDetailResponse],
    summary="后台获取培训项目详情",
    dependencies=[Depends(get_current_admin)],
)
async def get_program(
    program_id: int,
    service: ProgramQueryService = Depends(get_program_query_service),
) -> ApiResponse[ProgramDetailResponse]:
    """Get a program by id."""
    program = await service.get_program_by_id(program_id)
    return ApiResponse.ok(data=ProgramDetailResponse.model_validate(program))


@router.post(
    "",
    response_model=ApiResponse[ProgramDetailResponse],
    status_code=status.HTTP_201_CREATED,
    summary="创建培训项目",
    description="slug 缺省时由标题自动生成，重复 slug 返回 409",
)
async def create_program(
    request: CreateProgramRequest,
    admin: AdminContext = Depends(get_current_admin),
    handler: CreateProgramHandler = Depends(get_create_program_handler),
    query_service: ProgramQueryService = Depends(get_program_query_service),
) -> ApiResponse[ProgramDetailResponse]:
    """Create a program."""
    payload = request.model_dump(exclude={"status"})
    command = CreateProgramCommand(
        actor_id=admin.user_id,
        status=ProgramStatus(request.status.value),
        **payload,
    )
    program = await handler.handle(command)

    return ApiResponse.ok(
        data=ProgramDetailResponse.model_validate(
            await query_service.get_program_by_id(program.id)
        ),
        message="Program created successfully",
    )


@router.put(
    "/{program_id}",
    response_model=ApiResponse[ProgramDetailResponse],
    summary="更新培训项目",
)
async def update_program(
    program_id: int,
    request: UpdateProgramRequest,
    admin: AdminContext = Depends(get_current_admin),
    handler: UpdateProgramHandler = Depends(get_update_program_handler),
    query_service: ProgramQueryService = Depends(get_program_query_service),
) -> ApiResponse[ProgramDetailResponse]:
    """Update a program."""
    command = UpdateProgramCommand(
        actor_id=admin.user_id,
        program_id=program_id,
        changes=request.to_changes(),
    )
    program = await handler.handle(command)

    return ApiResponse.ok(
        data=ProgramDetailResponse.model_validate(
            await query_service.get_program_by_id(program.id)
        ),
        message="Program updated successfully",
    )


@router.delete(
    "/{program_id}",
    response_model=ApiResponse[dict[str, bool]],
    summary="删除培训项目",
)
async def delete_program(
    program_id: int,
    admin: AdminContext = Depends(get_current_admin),
    handler: DeleteProgramHandler = Depends(get_delete_program_handler),
) -> ApiResponse[dict[str, bool]]:
    """Delete a program and its schedules."""
    deleted = await handler.handle(
        DeleteProgramCommand(actor_id=admin.user_id, program_id=program_id)
    )
    return ApiResponse.ok(
        data={"deleted": deleted},
        message="Program deleted successfully",
    )
