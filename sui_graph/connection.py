"""Cursor-based pagination: page arguments and connection windows."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from .errors import InvalidArgument

T = TypeVar("T")


@dataclass(frozen=True)
class PageArgs:
    """Validated ``first``/``after`` or ``last``/``before`` window request.

    Cursors are opaque provider tokens and are never inspected here.
    """

    first: int | None = None
    after: str | None = None
    last: int | None = None
    before: str | None = None

    def __post_init__(self) -> None:
        forward = self.first is not None or self.after is not None
        backward = self.last is not None or self.before is not None
        if forward and backward:
            raise InvalidArgument(
                "Cannot paginate forwards (first/after) and backwards "
                "(last/before) in the same request"
            )
        for name, value in (("first", self.first), ("last", self.last)):
            if value is not None and value < 0:
                raise InvalidArgument(f"'{name}' must be non-negative, got {value}")

    @property
    def is_backward(self) -> bool:
        return self.last is not None or self.before is not None

    def limit(self, default: int, maximum: int) -> int:
        """Requested page size; ``default`` when unset, never above ``maximum``."""
        requested = self.last if self.is_backward else self.first
        if requested is None:
            return default
        if requested > maximum:
            raise InvalidArgument(
                f"Requested page size {requested} exceeds maximum of {maximum}"
            )
        return requested


@dataclass(frozen=True)
class Edge(Generic[T]):
    cursor: str
    node: T


@dataclass(frozen=True)
class PageInfo:
    has_next_page: bool = False
    has_previous_page: bool = False
    start_cursor: str | None = None
    end_cursor: str | None = None


@dataclass(frozen=True)
class Connection(Generic[T]):
    """Ordered window of ``(cursor, node)`` edges over a larger collection."""

    edges: tuple[Edge[T], ...] = ()
    page_info: PageInfo = field(default_factory=PageInfo)

    @classmethod
    def from_edges(
        cls,
        edges: list[Edge[T]],
        has_next_page: bool,
        has_previous_page: bool,
    ) -> Connection[T]:
        return cls(
            edges=tuple(edges),
            page_info=PageInfo(
                has_next_page=has_next_page,
                has_previous_page=has_previous_page,
                start_cursor=edges[0].cursor if edges else None,
                end_cursor=edges[-1].cursor if edges else None,
            ),
        )

    @property
    def nodes(self) -> list[T]:
        return [edge.node for edge in self.edges]
