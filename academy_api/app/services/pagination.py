"""
Paginated list queries.

``fetch_page`` turns ``page``/``pageSize`` and a set of optional
filters into one select against the Record Store and wraps the result
in a :class:`PageEnvelope`.  Filters are combined with AND semantics
and applied before ordering and ranging; ``totalData`` is the row count
of the filtered query ignoring the range.
"""

import math
from datetime import date
from typing import Any, List, Optional, Sequence, Tuple, Type

from pydantic import BaseModel

from ..core.db import EQ, CONTAINS, Filter, Ordering
from ..core.errors import BadRequest
from ..schemas.common import PageEnvelope

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10

NEWEST_FIRST = Ordering("created_at", descending=True)


def contains(column: str, value: Optional[str]) -> Optional[Filter]:
    """Case-insensitive substring filter; ``None`` for an empty value."""
    if value is None or not str(value).strip():
        return None
    return Filter(column, CONTAINS, str(value).strip())


def equals(column: str, value: Any) -> Optional[Filter]:
    """Exact match filter; ``None`` for an empty value."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, date):
        value = value.isoformat()
    return Filter(column, EQ, value)


def compact(filters: Sequence[Optional[Filter]]) -> List[Filter]:
    return [flt for flt in filters if flt is not None]


def page_range(page: int, page_size: int) -> Tuple[int, int]:
    """Zero-based inclusive row range for a 1-based page."""
    if page_size <= 0:
        raise BadRequest("pageSize harus lebih besar dari 0")
    if page <= 0:
        raise BadRequest("page harus lebih besar dari 0")
    start = (page - 1) * page_size
    return start, start + page_size - 1


def total_pages(total: int, page_size: int) -> int:
    return math.ceil(total / page_size) if page_size > 0 else 0


async def fetch_page(
    store,
    table: str,
    model: Type[BaseModel],
    filters: Sequence[Optional[Filter]] = (),
    page: int = DEFAULT_PAGE,
    page_size: int = DEFAULT_PAGE_SIZE,
    ordering: Ordering = NEWEST_FIRST,
) -> PageEnvelope:
    row_range = page_range(page, page_size)
    result = await store.select(table, compact(filters), ordering=ordering, row_range=row_range)
    return PageEnvelope[model](
        success=True,
        data=[model.model_validate(row) for row in result.rows],
        totalData=result.count,
        currentPage=page,
        pageSize=page_size,
        totalPages=total_pages(result.count, page_size),
    )


async def fetch_all(
    store,
    table: str,
    model: Type[BaseModel],
    filters: Sequence[Optional[Filter]] = (),
    ordering: Optional[Ordering] = None,
) -> PageEnvelope:
    """Unpaged variant returned in the same envelope as a single page."""
    result = await store.select(table, compact(filters), ordering=ordering)
    total = len(result.rows)
    return PageEnvelope[model](
        success=True,
        data=[model.model_validate(row) for row in result.rows],
        totalData=total,
        currentPage=1,
        pageSize=total,
        totalPages=1 if total else 0,
    )
