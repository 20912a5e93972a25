"""Contact list policy for the admin inbox."""

from src.core.domain.listing import ListPolicy
from src.modules.contacts.domain.entities import ContactStatus


def contact_list_policy(page_size: int) -> ListPolicy:
    """Newest first; page size comes from configuration."""
    return ListPolicy(
        sort_fields={"created_at": "created_at"},
        default_sort="created_at",
        default_page_size=page_size,
        statuses=frozenset(s.value for s in ContactStatus),
    )
