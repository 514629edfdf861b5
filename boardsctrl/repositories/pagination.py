"""Offset pagination over SQLAlchemy queries."""

import math
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy.orm import Query


@dataclass
class Page:
    """One page of results plus the totals clients need to navigate."""

    items: list[Any] = field(default_factory=list)
    total: int = 0
    page_number: int = 1
    page_size: int = 10

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.page_size) if self.page_size else 0


def paginate(query: Query, page_number: int, page_size: int) -> Page:
    """
    Return page `page_number` (1-based) of `query`, ordered by the caller.

    Pages past the end are empty, not an error.
    """
    if page_number < 1:
        raise ValueError("page_number must be >= 1")
    if page_size < 1:
        raise ValueError("page_size must be >= 1")
    total = query.order_by(None).count()
    items = query.offset((page_number - 1) * page_size).limit(page_size).all()
    return Page(items=items, total=total, page_number=page_number, page_size=page_size)
