"""List query descriptor shared by the content list endpoints.

原始查询参数都来自 URL，不可信。这里把它们一次性规范化为不可变的 ListQuery，
计数查询和分页查询都只读取这一个描述对象，保证 total 与当前页使用同一过滤条件。

规范化规则（宽松策略，从不抛异常）：
- page: 非数字/缺省 -> 1；小于 1 -> 1
- limit: 非数字/缺省 -> 策略默认值；小于 1 -> 1；超过上限 -> 上限
- category_id: 非数字 -> 忽略该过滤
- search: 去掉 NUL 字符（PostgreSQL 文本不接受）并去空白后为空 -> 忽略
- sort_by: 不在白名单 -> 默认排序字段
- sort_order: 仅 "asc" 为升序，其余一律降序
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum


class SortDirection(str, Enum):
    """排序方向。"""

    ASC = "asc"
    DESC = "desc"


class Visibility(str, Enum):
    """列表可见性范围。"""

    PUBLISHED = "published"  # 公开接口：仅已发布
    ANY = "any"  # 管理接口：不限状态


PUBLISHED_STATUS = "published"
MAX_PAGE = 1_000_000


@dataclass(frozen=True)
class ListPolicy:
    """Per-endpoint listing rules.

    sort_fields 将对外的排序参数名映射为内部字段名，同时作为白名单。
    """

    sort_fields: Mapping[str, str]
    default_sort: str
    default_page_size: int = 9
    max_page_size: int = 100
    statuses: frozenset[str] = frozenset()
    time_gated: bool = False  # 是否额外要求 published_at <= now


@dataclass(frozen=True)
class RawListParams:
    """List parameters exactly as received, before normalization."""

    page: str | None = None
    limit: str | None = None
    category_id: str | None = None
    search: str | None = None
    sort_by: str | None = None
    sort_order: str | None = None
    status: str | None = None


@dataclass(frozen=True)
class ListQuery:
    """Normalized, immutable list query."""

    sort_field: str
    sort_direction: SortDirection = SortDirection.DESC
    page: int = 1
    page_size: int = 9
    visibility: Visibility = Visibility.PUBLISHED
    status: str | None = None
    category_id: int | None = None
    search: str | None = None
    published_before: datetime | None = field(default=None)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def ascending(self) -> bool:
        return self.sort_direction == SortDirection.ASC


def parse_int(value: str | int | None) -> int | None:
    """Parse an integer leniently; return None for anything unparseable."""
    if value is None:
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def parse_number(value: str | None) -> float | None:
    """Parse a finite number leniently; return None otherwise."""
    if value is None:
        return None
    try:
        number = float(str(value).strip())
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def total_pages(total: int, page_size: int) -> int:
    """ceil(total / page_size)."""
    if total <= 0 or page_size <= 0:
        return 0
    return math.ceil(total / page_size)


def normalize_list_params(
    raw: RawListParams,
    policy: ListPolicy,
    visibility: Visibility = Visibility.PUBLISHED,
    now: datetime | None = None,
) -> ListQuery:
    """Turn raw query-string values into a ListQuery. Never raises."""
    page = parse_int(raw.page)
    if page is None or page < 1:
        page = 1
    page = min(page, MAX_PAGE)

    page_size = parse_int(raw.limit)
    if page_size is None:
        page_size = policy.default_page_size
    page_size = max(1, min(page_size, policy.max_page_size))

    search = raw.search.replace("\x00", "").strip() if raw.search else None

    sort_field = policy.sort_fields.get((raw.sort_by or "").strip(), policy.default_sort)
    direction = (
        SortDirection.ASC if raw.sort_order == SortDirection.ASC.value else SortDirection.DESC
    )

    if visibility == Visibility.PUBLISHED:
        status = PUBLISHED_STATUS
    else:
        status = raw.status if raw.status in policy.statuses else None

    published_before = None
    if policy.time_gated and visibility == Visibility.PUBLISHED:
        published_before = now or datetime.now(UTC)

    return ListQuery(
        sort_field=sort_field,
        sort_direction=direction,
        page=page,
        page_size=page_size,
        visibility=visibility,
        status=status,
        category_id=parse_int(raw.category_id),
        search=search or None,
        published_before=published_before,
    )
