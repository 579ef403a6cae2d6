"""Page/limit handling for list endpoints."""

from dataclasses import dataclass
from math import ceil

from fastapi import Query

DEFAULT_LIMIT = 20
MAX_LIMIT = 100


@dataclass(frozen=True)
class Page:
    """A resolved page request: ``take`` rows after skipping ``skip``."""

    page: int
    limit: int

    @property
    def take(self) -> int:
        return self.limit

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    def meta(self, total: int, count: int) -> dict:
        return {
            "total": total,
            "count": count,
            "page": self.page,
            "limit": self.limit,
            "pages": ceil(total / self.limit) if self.limit > 0 else 0,
        }


async def get_page(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
) -> Page:
    return Page(page=page, limit=limit)
