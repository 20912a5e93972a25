"""CDN cache-control policies for public endpoints."""

from dataclasses import dataclass

from fastapi import Response

from src.core.config import settings


@dataclass(frozen=True)
class CachePolicy:
    """Shared-cache TTL plus stale-while-revalidate window."""

    s_maxage: int
    stale_while_revalidate: int

    @property
    def header_value(self) -> str:
        return (
            f"public, s-maxage={self.s_maxage}, "
            f"stale-while-revalidate={self.stale_while_revalidate}"
        )


LIST_CACHE = CachePolicy(settings.LIST_CACHE_MAX_AGE, settings.LIST_CACHE_SWR)
TAXONOMY_CACHE = CachePolicy(
    settings.TAXONOMY_CACHE_MAX_AGE, settings.TAXONOMY_CACHE_SWR
)


def apply_cache_policy(response: Response, policy: CachePolicy) -> None:
    response.headers["Cache-Control"] = policy.header_value
