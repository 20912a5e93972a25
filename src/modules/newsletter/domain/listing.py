"""Subscriber list policy for the admin console."""

from src.core.domain.listing import ListPolicy
from src.modules.newsletter.domain.entities import SubscriberStatus


def subscriber_list_policy(page_size: int) -> ListPolicy:
    """Newest first; page size comes from configuration."""
    return ListPolicy(
        sort_fields={
            "created_at": "created_at",
            "createdAt": "created_at",
            "email": "email",
        },
        default_sort="created_at",
        default_page_size=page_size,
        statuses=frozenset(s.value for s in SubscriberStatus),
    )
