"""Execute a ListQuery against SQLAlchemy.

一个 ListQuery 同时驱动过滤、排序、分页和计数：
- 计数使用窗口函数 COUNT(*) OVER ()，与分页结果出自同一条语句
- 当页码超出范围导致结果为空时，在同一会话（同一事务）内补一次 COUNT
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import ColumnElement, Select, func, or_, select
from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.domain.listing import ListQuery


@dataclass(frozen=True)
class ListColumns:
    """Column bindings for one listable table."""

    model: Any
    id: Any
    status: Any
    category: Any
    sort: Mapping[str, Any]
    search: Sequence[Any] = field(default_factory=tuple)
    published_at: Any = None


def build_conditions(
    query: ListQuery,
    columns: ListColumns,
    extra: Sequence[ColumnElement[bool]] = (),
) -> list[ColumnElement[bool]]:
    """Translate the descriptor into WHERE conditions."""
    conditions: list[ColumnElement[bool]] = []

    if query.status is not None:
        conditions.append(columns.status == query.status)

    if query.published_before is not None and columns.published_at is not None:
        conditions.append(
            or_(
                columns.published_at.is_(None),
                columns.published_at <= query.published_before,
            )
        )

    if query.category_id is not None:
        conditions.append(columns.category == query.category_id)

    if query.search and columns.search:
        conditions.append(
            or_(
                *(
                    column.icontains(query.search, autoescape=True)
                    for column in columns.search
                )
            )
        )

    conditions.extend(extra)
    return conditions


def apply_ordering(statement: Select, query: ListQuery, columns: ListColumns) -> Select:
    """ORDER BY the requested field, then id ascending as a stable tie-break."""
    sort_column = columns.sort[query.sort_field]
    ordered = sort_column.asc() if query.ascending else sort_column.desc()
    return statement.order_by(ordered.nullslast(), columns.id.asc())


async def fetch_page(
    session: AsyncSession,
    statement: Select,
    query: ListQuery,
    columns: ListColumns,
    extra: Sequence[ColumnElement[bool]] = (),
) -> tuple[Sequence[Row], int]:
    """Run the page fetch and return (rows, total).

    statement 是已经完成 JOIN 的基础 SELECT，本函数负责附加过滤、排序、分页和计数。
    """
    conditions = build_conditions(query, columns, extra)
    paged = (
        statement.add_columns(func.count().over().label("total_count"))
        .where(*conditions)
    )
    paged = apply_ordering(paged, query, columns)
    paged = paged.offset(query.offset).limit(query.page_size)

    result = await session.execute(paged)
    rows = result.all()
    if rows:
        return rows, rows[0].total_count

    if query.page == 1:
        return [], 0

    count_statement = (
        select(func.count()).select_from(columns.model).where(*conditions)
    )
    total = (await session.execute(count_statement)).scalar_one()
    return [], total
