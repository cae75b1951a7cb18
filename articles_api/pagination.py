"""
Page parameter clamping and in-memory page slicing.

Out-of-range input is clamped rather than rejected: a page number below 1
becomes 1, a page size below 1 falls back to the default and a page size
above the ceiling is capped.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, Sequence, TypeVar

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 50

T = TypeVar("T")


class PaginationParameters:
    """
    Requested page, already normalised.

    Attributes
    ----------
    page_number:
        1-based page number.
    page_size:
        Items per page, within ``[1, max_page_size]``.
    """

    def __init__(
        self,
        page_number: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        *,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
    ) -> None:
        self.page_number = page_number if page_number >= 1 else 1
        if page_size < 1:
            page_size = default_page_size
        self.page_size = min(page_size, max_page_size)

    @property
    def offset(self) -> int:
        """Number of items to skip before the current page."""
        return (self.page_number - 1) * self.page_size

    def __repr__(self) -> str:
        return f"PaginationParameters(page_number={self.page_number}, page_size={self.page_size})"


def total_pages(total_count: int, page_size: int) -> int:
    if total_count <= 0:
        return 0
    return math.ceil(total_count / page_size)


@dataclass
class PaginationResult(Generic[T]):
    items: list[T] = field(default_factory=list)
    total_count: int = 0
    page_number: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    total_pages: int = 0


def paginate(items: Sequence[T], total_count: int, params: PaginationParameters) -> PaginationResult[T]:
    """Slice an already materialised result set down to the requested page."""
    page = list(items[params.offset:params.offset + params.page_size])
    return PaginationResult(
        items=page,
        total_count=total_count,
        page_number=params.page_number,
        page_size=params.page_size,
        total_pages=total_pages(total_count, params.page_size),
    )
