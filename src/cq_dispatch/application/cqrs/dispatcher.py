"""Application CQRS – CommandQueryDispatcher, StandardCommandQueryDispatcher."""
from __future__ import annotations

import abc
from typing import Any, TypeVar, overload

from cq_dispatch.application.cqrs.bindings import HandlerKind, binding_key
from cq_dispatch.application.cqrs.commands import Command
from cq_dispatch.application.cqrs.queries import Query
from cq_dispatch.kernel.errors import (
    HandlerNotFoundError,
    InvalidRequestError,
    ServiceNotRegisteredError,
)
from cq_dispatch.resolution.ports import ResolutionScope

V = TypeVar("V")


class CommandQueryDispatcher(abc.ABC):
    """Routes commands and queries to the handler bound to their concrete type."""

    @overload
    async def dispatch(self, request: Query[V]) -> V: ...

    @overload
    async def dispatch(self, request: Command) -> None: ...

    @abc.abstractmethod
    async def dispatch(self, request: Command | Query[Any]) -> Any:
        """Execute a command, or evaluate a query and return its value."""


class StandardCommandQueryDispatcher(CommandQueryDispatcher):
    """Resolves the binding for ``type(request)`` from its scope and awaits it.

    One resolution and one invocation per call. Whatever the scope or the
    handler raises reaches the caller unchanged; only a missing binding for
    the request type itself becomes :class:`HandlerNotFoundError`.
    """

    def __init__(self, scope: ResolutionScope) -> None:
        self._scope = scope

    @overload
    async def dispatch(self, request: Query[V]) -> V: ...

    @overload
    async def dispatch(self, request: Command) -> None: ...

    async def dispatch(self, request: Command | Query[Any]) -> Any:
        if isinstance(request, Query):
            kind = HandlerKind.QUERY
        elif isinstance(request, Command):
            kind = HandlerKind.COMMAND
        else:
            raise InvalidRequestError(request)

        request_type = type(request)
        key = binding_key(kind, request_type)
        try:
            binding = await self._scope.resolve(key)
        except ServiceNotRegisteredError as exc:
            if exc.key != key:
                raise
            raise HandlerNotFoundError(request_type, cause=exc) from exc
        return await binding.handle(request)


__all__ = ["CommandQueryDispatcher", "StandardCommandQueryDispatcher"]
