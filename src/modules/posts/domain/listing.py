"""Post list policy."""

from src.core.domain.listing import ListPolicy
from src.modules.posts.domain.entities import PostStatus

# 文章列表额外要求 published_at 为空或不晚于当前时间
POST_LIST_POLICY = ListPolicy(
    sort_fields={
        "id": "id",
        "title": "title",
        "published_at": "published_at",
        "publishedAt": "published_at",
        "created_at": "created_at",
        "createdAt": "created_at",
        "updated_at": "updated_at",
        "updatedAt": "updated_at",
        "views": "views",
    },
    default_sort="published_at",
    statuses=frozenset(s.value for s in PostStatus),
    time_gated=True,
)
