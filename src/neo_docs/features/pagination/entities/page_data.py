"""Page metadata attached to listing results."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class PageData:
    """Derived page information. Never persisted."""

    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @property
    def next_page(self):
        return self.page + 1 if self.has_next else None

    @property
    def prev_page(self):
        return self.page - 1 if self.has_prev else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "current_page": self.page,
            "limit": self.limit,
            "total_items": self.total,
            "total_pages": self.total_pages,
            "has_next": self.has_next,
            "has_prev": self.has_prev,
            "next_page": self.next_page,
            "prev_page": self.prev_page,
        }
