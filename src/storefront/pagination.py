"""Page windows and pagination metadata shared by product and order listings."""

import math
from dataclasses import dataclass

from protean.utils.globals import current_domain


@dataclass(frozen=True)
class PageWindow:
    page: int
    size: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size

    def describe(self, total: int) -> dict:
        total_pages = math.ceil(total / self.size) if total else 0
        return {
            "current_page": self.page,
            "total_pages": total_pages,
            "total_items": total,
            "items_per_page": self.size,
            "has_next_page": self.page < total_pages,
            "has_prev_page": self.page > 1,
        }


def page_window(page: int | None = None, limit: int | None = None) -> PageWindow:
    """Resolve the requested page and limit, capping the page size server-side."""
    cap = int(current_domain.page_size_cap)
    size = limit if limit is not None else int(current_domain.default_page_size)
    return PageWindow(page=max(page or 1, 1), size=max(min(size, cap), 1))
