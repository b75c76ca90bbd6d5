# /app/services/pagination.py

"""
The query/pagination layer shared by every paginated list endpoint.

`paginate` slices an already-filtered SQLAlchemy query and counts the full
filtered set independently of the slice; `build_pagination` turns the numbers
into the `pagination` block of the response envelope.
"""

import math
from typing import List, Optional, Tuple, TypeVar

from sqlalchemy.orm import Query

from ..models.common_model import PaginationInfo

T = TypeVar("T")


def resolve_page_params(page: int, limit: Optional[int], default_limit: int, max_limit: int) -> Tuple[int, int]:
    """Applies the configured default page size and caps oversized requests."""
    limit = limit or default_limit
    return max(page, 1), max(1, min(limit, max_limit))


def paginate(query: Query, order_by, page: int, limit: int) -> Tuple[List[T], int]:
    """
    Returns `(items, total)` for a 1-based page.

    `total` is counted on the filtered query before ordering and slicing, so
    it reflects every matching row (including rows filtered through joins),
    never just the length of the page.
    """
    total = query.order_by(None).count()
    items = (
        query.order_by(order_by)
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    return items, total


def build_pagination(total: int, page: int, limit: int) -> PaginationInfo:
    total_pages = math.ceil(total / limit)
    return PaginationInfo(
        currentPage=page,
        totalPages=total_pages,
        totalItems=total,
        itemsPerPage=limit,
        hasNextPage=page < total_pages,
        hasPrevPage=page > 1,
    )
