from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from django.db.models import QuerySet

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One zero-based slice of a result set plus store-sourced metadata.

    - `number` starts at 0
    - `size` is the requested page size, not the length of `content`
    - A page size of 0 yields no content and no pages
    """

    content: list[T]
    number: int
    size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        if self.size == 0:
            return 0
        return math.ceil(self.total_elements / self.size)

    def map(self, fn: Callable[[T], U]) -> "Page[U]":
        return Page([fn(item) for item in self.content], self.number, self.size, self.total_elements)


def paginate(queryset: QuerySet, page: int, size: int) -> Page:
    """Slice an ordered queryset; out-of-range pages come back empty."""
    if page < 0 or size < 0:
        raise ValueError("page and size must be non-negative")
    total = queryset.count()
    if size == 0:
        return Page([], page, size, total)
    start = page * size
    return Page(list(queryset[start:start + size]), page, size, total)
