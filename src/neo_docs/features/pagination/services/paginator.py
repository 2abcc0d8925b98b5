"""Offset pagination over a known item count."""

import math
from dataclasses import dataclass
from typing import Any, Optional

from ....utils.numbers import to_natural_number
from ..entities.page_data import PageData


@dataclass(frozen=True)
class Pagination:
    """Skip offset plus the page metadata for one listing call."""

    skip: int
    limit: int
    page_data: PageData


def resolve_limit(limit: Any, default: int, maximum: Optional[int] = None) -> int:
    """Apply the default page size to a missing limit and cap oversized ones."""
    if limit is None:
        limit = default
    limit = to_natural_number(limit)
    if maximum is not None:
        limit = min(limit, maximum)
    return limit


def paginate(page: Any, limit: Any, total_count: int) -> Pagination:
    """Compute skip and page metadata.

    ``page`` and ``limit`` are coerced to natural numbers, so invalid
    inputs fall back to 1 and this never fails.
    """
    page = to_natural_number(page)
    limit = to_natural_number(limit)
    total_count = max(int(total_count or 0), 0)

    total_pages = math.ceil(total_count / limit)
    page_data = PageData(
        page=page,
        limit=limit,
        total=total_count,
        total_pages=total_pages,
        has_next=page < total_pages,
        has_prev=page > 1,
    )
    return Pagination(skip=(page - 1) * limit, limit=limit, page_data=page_data)
