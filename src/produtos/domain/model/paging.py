"""Sorting and pagination value objects.

A ``Sort`` is an ordered list of ``Order``s; a ``PageRequest`` asks for one
fixed-size slice of a sorted collection; a ``Page`` is what comes back.
Adapters that cannot push these down to their backend use ``sort_items``
and ``paginate`` to apply them in memory.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, Iterable, Mapping, Sequence, TypeVar

from produtos.domain.exceptions import ValidationError

T = TypeVar("T")

# Largest row offset or limit a SQL backend accepts (signed 64-bit).
MAX_ROWS = 2**63 - 1


class Direction(Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, raw: str) -> Direction:
        try:
            return cls(raw.strip().lower())
        except ValueError as exc:
            raise ValidationError(
                f"Invalid sort direction {raw!r} (expected 'asc' or 'desc')"
            ) from exc


@dataclass(frozen=True)
class Order:
    """Ordering on a single property."""

    property: str
    direction: Direction = Direction.ASC

    def __post_init__(self) -> None:
        if not self.property or not self.property.strip():
            raise ValidationError("Sort property is required")

    @property
    def descending(self) -> bool:
        return self.direction is Direction.DESC


@dataclass(frozen=True)
class Sort:
    """Ordered list of property orderings; earlier orders take precedence."""

    orders: tuple[Order, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.orders)

    def __iter__(self):
        return iter(self.orders)

    @staticmethod
    def by(*properties: str, direction: Direction = Direction.ASC) -> Sort:
        return Sort(tuple(Order(p, direction) for p in properties))

    @staticmethod
    def parse(*expressions: str) -> Sort:
        """Build a Sort from ``property[,direction]`` expressions.

        ``Sort.parse("price,desc", "name")`` orders by price descending,
        then by name ascending.
        """
        orders = []
        for expr in expressions:
            prop, _, direction = expr.partition(",")
            orders.append(
                Order(
                    prop.strip(),
                    Direction.parse(direction) if direction else Direction.ASC,
                )
            )
        return Sort(tuple(orders))

    def validate(self, allowed: Iterable[str]) -> None:
        allowed = set(allowed)
        for order in self.orders:
            if order.property not in allowed:
                raise ValidationError(
                    f"Cannot sort by {order.property!r} "
                    f"(allowed: {', '.join(sorted(allowed))})"
                )


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page number plus page size."""

    page: int = 0
    size: int = 20
    sort: Sort = field(default_factory=Sort)

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValidationError("Page number must not be negative")
        if self.size < 1:
            raise ValidationError("Page size must be at least 1")
        if self.size > MAX_ROWS or self.page * self.size > MAX_ROWS:
            raise ValidationError(
                f"Page {self.page} of size {self.size} is out of range"
            )

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True)
class Page(Generic[T]):
    """One slice of a collection plus enough to navigate the rest."""

    content: list[T]
    number: int
    size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size) if self.size else 0

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.number > 0

    @property
    def is_first(self) -> bool:
        return not self.has_previous

    @property
    def is_last(self) -> bool:
        return not self.has_next

    def __len__(self) -> int:
        return len(self.content)

    def __iter__(self):
        return iter(self.content)


# --- In-memory helpers --------------------------------------------------------


def sort_items(
    items: Iterable[T],
    sort: Sort,
    keys: Mapping[str, Callable[[T], Any]],
) -> list[T]:
    """Return ``items`` ordered by ``sort``.

    Applies the orders last-to-first with a stable sort, which gives the
    same result as a multi-column ORDER BY.
    """
    sort.validate(keys)
    result = list(items)
    for order in reversed(sort.orders):
        result.sort(key=keys[order.property], reverse=order.descending)
    return result


def paginate(
    items: Sequence[T],
    request: PageRequest,
    keys: Mapping[str, Callable[[T], Any]],
    default_sort: Sort,
) -> Page[T]:
    """Sort and slice ``items`` according to ``request``.

    Unsorted requests fall back to ``default_sort`` so successive pages
    never overlap.
    """
    ordered = sort_items(items, request.sort or default_sort, keys)
    content = ordered[request.offset : request.offset + request.size]
    return Page(
        content=content,
        number=request.page,
        size=request.size,
        total_elements=len(ordered),
    )
