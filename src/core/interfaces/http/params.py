"""Shared request parameter dependencies."""

from fastapi import Query, Request

from src.core.domain.listing import RawListParams


def get_list_params(
    page: str | None = Query(None, description="页码，从 1 开始"),
    limit: str | None = Query(None, description="每页数量"),
    category_id: str | None = Query(None, description="分类ID"),
    search: str | None = Query(None, description="搜索关键词"),
    sort_by: str | None = Query(None, alias="sortBy", description="排序字段"),
    sort: str | None = Query(None, description="排序字段（sortBy 的别名）"),
    sort_by_snake: str | None = Query(None, alias="sort_by", include_in_schema=False),
    sort_order: str | None = Query(None, alias="sortOrder", description="asc 或 desc"),
    sort_order_snake: str | None = Query(
        None, alias="sort_order", include_in_schema=False
    ),
    status: str | None = Query(None, description="状态过滤（仅管理接口生效）"),
) -> RawListParams:
    """Collect list parameters as raw strings.

    所有参数都按字符串接收，非法值在 normalize_list_params 中回退为默认值，
    而不是由 FastAPI 返回 422。
    """
    return RawListParams(
        page=page,
        limit=limit,
        category_id=category_id,
        search=search,
        sort_by=sort_by or sort or sort_by_snake,
        sort_order=sort_order or sort_order_snake,
        status=status,
    )


def get_client_ip(request: Request) -> str:
    """Client address, honouring reverse-proxy headers."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip.strip()
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


def get_user_agent(request: Request) -> str | None:
    return request.headers.get("user-agent")
