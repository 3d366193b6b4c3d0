"""Application CQRS – Query, QueryHandler."""
from __future__ import annotations

import abc
from typing import Any, Generic, TypeVar

V = TypeVar("V")
Q = TypeVar("Q", bound="Query[Any]")


class Query(Generic[V]):
    """Marker base for queries; ``V`` is the type of value the query produces.

    Concrete queries fix ``V``: ``class GetOrder(Query[Order])``.
    """


class QueryHandler(abc.ABC, Generic[Q, V]):
    """Handle a single query type and return its value."""

    @abc.abstractmethod
    async def handle(self, query: Q) -> V: ...


__all__ = ["Query", "QueryHandler"]
