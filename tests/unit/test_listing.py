"""列表参数规范化单元测试。

测试覆盖：
- page / limit 的宽松解析与上下限
- 排序字段白名单与排序方向
- 公开/管理可见性下的 status 处理
- 文章列表的发布时间门槛
- total_pages 与 slug 生成
"""

from datetime import UTC, datetime

import pytest

from src.core.domain.listing import (
    MAX_PAGE,
    PUBLISHED_STATUS,
    RawListParams,
    SortDirection,
    Visibility,
    normalize_list_params,
    parse_int,
    parse_number,
    total_pages,
)
from src.core.domain.slug import is_valid_slug, slugify
from src.modules.posts.domain.listing import POST_LIST_POLICY
from src.modules.programs.domain.listing import (
    PROGRAM_LIST_POLICY,
    normalize_program_filters,
)


class TestPageAndLimit:
    """page / limit 规范化。"""

    def test_defaults(self):
        query = normalize_list_params(RawListParams(), PROGRAM_LIST_POLICY)

        assert query.page == 1
        assert query.page_size == 9
        assert query.offset == 0

    @pytest.mark.parametrize("raw_page", ["0", "-3", "abc", "", "  "])
    def test_invalid_page_falls_back_to_first(self, raw_page):
        query = normalize_list_params(RawListParams(page=raw_page), PROGRAM_LIST_POLICY)
        assert query.page == 1

    def test_page_is_trimmed_and_parsed(self):
        query = normalize_list_params(
            RawListParams(page=" 3 ", limit="10"), PROGRAM_LIST_POLICY
        )
        assert query.page == 3
        assert query.offset == 20

    def test_huge_page_is_capped(self):
        query = normalize_list_params(
            RawListParams(page="99999999999"), PROGRAM_LIST_POLICY
        )
        assert query.page == MAX_PAGE

    def test_limit_bounds(self):
        too_big = normalize_list_params(RawListParams(limit="500"), PROGRAM_LIST_POLICY)
        too_small = normalize_list_params(RawListParams(limit="0"), PROGRAM_LIST_POLICY)
        garbage = normalize_list_params(RawListParams(limit="ten"), PROGRAM_LIST_POLICY)

        assert too_big.page_size == 100
        assert too_small.page_size == 1
        assert garbage.page_size == 9


class TestSorting:
    """排序白名单。"""

    def test_default_sort_per_endpoint(self):
        programs = normalize_list_params(RawListParams(), PROGRAM_LIST_POLICY)
        posts = normalize_list_params(RawListParams(), POST_LIST_POLICY)

        assert programs.sort_field == "created_at"
        assert posts.sort_field == "published_at"
        assert programs.sort_direction == SortDirection.DESC

    def test_camel_case_alias(self):
        query = normalize_list_params(
            RawListParams(sort_by="createdAt", sort_order="asc"), PROGRAM_LIST_POLICY
        )
        assert query.sort_field == "created_at"
        assert query.ascending

    def test_unknown_field_uses_default(self):
        query = normalize_list_params(
            RawListParams(sort_by="password; DROP TABLE programs"),
            PROGRAM_LIST_POLICY,
        )
        assert query.sort_field == "created_at"

    @pytest.mark.parametrize("order", ["ASC", "ascending", "desc", "", None])
    def test_only_exact_asc_is_ascending(self, order):
        query = normalize_list_params(
            RawListParams(sort_order=order), PROGRAM_LIST_POLICY
        )
        assert query.sort_direction == SortDirection.DESC

    def test_post_only_field_not_allowed_for_programs(self):
        query = normalize_list_params(
            RawListParams(sort_by="published_at"), PROGRAM_LIST_POLICY
        )
        assert query.sort_field == "created_at"


class TestVisibility:
    """公开与管理接口的状态过滤。"""

    def test_public_always_published(self):
        query = normalize_list_params(
            RawListParams(status="draft"), PROGRAM_LIST_POLICY
        )
        assert query.status == PUBLISHED_STATUS

    def test_admin_status_filter(self):
        query = normalize_list_params(
            RawListParams(status="draft"), PROGRAM_LIST_POLICY, Visibility.ANY
        )
        assert query.status == "draft"

    def test_admin_unknown_status_is_ignored(self):
        query = normalize_list_params(
            RawListParams(status="deleted"), PROGRAM_LIST_POLICY, Visibility.ANY
        )
        assert query.status is None

    def test_posts_are_time_gated_publicly(self):
        now = datetime(2025, 1, 6, tzinfo=UTC)
        public = normalize_list_params(RawListParams(), POST_LIST_POLICY, now=now)
        admin = normalize_list_params(
            RawListParams(), POST_LIST_POLICY, Visibility.ANY, now=now
        )
        programs = normalize_list_params(RawListParams(), PROGRAM_LIST_POLICY, now=now)

        assert public.published_before == now
        assert admin.published_before is None
        assert programs.published_before is None


class TestFilters:
    def test_category_and_search(self):
        query = normalize_list_params(
            RawListParams(category_id="6", search="  leadership  "),
            PROGRAM_LIST_POLICY,
        )
        assert query.category_id == 6
        assert query.search == "leadership"

    def test_blank_search_and_bad_category_are_dropped(self):
        query = normalize_list_params(
            RawListParams(category_id="six", search="   "), PROGRAM_LIST_POLICY
        )
        assert query.category_id is None
        assert query.search is None

    def test_nul_bytes_are_removed_from_search(self):
        query = normalize_list_params(
            RawListParams(search="lead\x00ership"), POST_LIST_POLICY
        )
        assert query.search == "leadership"

        only_nul = normalize_list_params(RawListParams(search=" \x00 "), POST_LIST_POLICY)
        assert only_nul.search is None

    def test_program_filters(self):
        filters = normalize_program_filters("3", "100.5", "nan")
        assert filters.instructor_id == 3
        assert filters.min_price == 100.5
        assert filters.max_price is None

    def test_parse_helpers(self):
        assert parse_int(" 42 ") == 42
        assert parse_int("4.2") is None
        assert parse_int(True) is None
        assert parse_number("inf") is None
        assert parse_number("1e3") == 1000.0


class TestTotalPages:
    @pytest.mark.parametrize(
        ("total", "page_size", "expected"),
        [(0, 9, 0), (1, 9, 1), (9, 9, 1), (10, 9, 2), (25, 10, 3)],
    )
    def test_ceil(self, total, page_size, expected):
        assert total_pages(total, page_size) == expected


class TestSlugify:
    def test_basic(self):
        assert slugify("Leadership & Management 101") == "leadership-management-101"

    def test_accents_and_separators(self):
        assert slugify("  Café --- Déjà_vu  ") == "cafe-deja-vu"

    def test_unrepresentable_title(self):
        assert slugify("项目管理") == ""

    def test_valid_slug(self):
        assert is_valid_slug("public-speaking")
        assert not is_valid_slug("Public Speaking")
        assert not is_valid_slug("trailing-")
        assert not is_valid_slug("a\x00b")
        assert not is_valid_slug("about\n")
