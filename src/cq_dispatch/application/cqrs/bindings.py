"""Application CQRS – handler bindings keyed by request type.

A handler is registered twice: under its own class, so the container can build
it with its dependencies, and under a parameterised wrapper type such as
``CommandHandlerBinding[CreateOrder]``. Parameterised generics compare and
hash by origin and arguments, so the dispatcher rebuilds the same registry key
from ``type(request)`` without knowing which class handles it.
"""
from __future__ import annotations

import dataclasses
import enum
import inspect
import types
import typing
from collections.abc import Awaitable, Callable
from typing import Any, Generic, TypeVar

from cq_dispatch.application.cqrs.commands import Command, CommandHandler
from cq_dispatch.application.cqrs.queries import Query, QueryHandler
from cq_dispatch.kernel.errors import BindingMismatchError, HandlerRegistrationError
from cq_dispatch.resolution.ports import ResolutionScope

C = TypeVar("C", bound=Command)
Q = TypeVar("Q", bound=Query[Any])


class HandlerKind(enum.StrEnum):
    COMMAND = "command"
    QUERY = "query"


_CAPABILITIES: dict[HandlerKind, tuple[type, type]] = {
    HandlerKind.COMMAND: (CommandHandler, Command),
    HandlerKind.QUERY: (QueryHandler, Query),
}


# ---------------------------------------------------------------------------
# Wrappers resolved by the dispatcher
# ---------------------------------------------------------------------------


class CommandHandlerBinding(Generic[C]):
    """Type-erased command handler, resolved by command type."""

    def __init__(self, command_type: type[C], handler: CommandHandler[C]) -> None:
        self.command_type = command_type
        self.handler = handler

    async def handle(self, command: C) -> None:
        if not isinstance(command, self.command_type):
            raise BindingMismatchError(self.command_type, type(command))
        await self.handler.handle(command)

    @classmethod
    def factory(
        cls, command_type: type[C], handler_type: type[CommandHandler[C]]
    ) -> Callable[[ResolutionScope], Awaitable[CommandHandlerBinding[C]]]:
        """Registry factory: resolve *handler_type* from the resolving scope and wrap it."""

        async def _build(scope: ResolutionScope) -> CommandHandlerBinding[C]:
            return cls(command_type, await scope.resolve(handler_type))

        return _build


class QueryHandlerBinding(Generic[Q]):
    """Type-erased query handler, resolved by query type."""

    def __init__(self, query_type: type[Q], handler: QueryHandler[Q, Any]) -> None:
        self.query_type = query_type
        self.handler = handler

    async def handle(self, query: Q) -> Any:
        if not isinstance(query, self.query_type):
            raise BindingMismatchError(self.query_type, type(query))
        return await self.handler.handle(query)

    @classmethod
    def factory(
        cls, query_type: type[Q], handler_type: type[QueryHandler[Q, Any]]
    ) -> Callable[[ResolutionScope], Awaitable[QueryHandlerBinding[Q]]]:
        async def _build(scope: ResolutionScope) -> QueryHandlerBinding[Q]:
            return cls(query_type, await scope.resolve(handler_type))

        return _build


def binding_key(kind: HandlerKind, request_type: type) -> Any:
    """Registry key of the wrapper bound to *request_type*."""
    if kind is HandlerKind.COMMAND:
        return CommandHandlerBinding[request_type]  # type: ignore[valid-type]
    return QueryHandlerBinding[request_type]  # type: ignore[valid-type]


@dataclasses.dataclass(frozen=True)
class HandlerBinding:
    """Record of one request type bound to the handler class that services it."""

    kind: HandlerKind
    request_type: type
    handler_type: type

    @property
    def key(self) -> Any:
        return binding_key(self.kind, self.request_type)


# ---------------------------------------------------------------------------
# Introspection
# ---------------------------------------------------------------------------


def declared_type_args(cls: type, origin: type) -> tuple[Any, ...] | None:
    """Type arguments *cls* passes to the generic *origin*, nearest base first."""
    for klass in cls.__mro__:
        for base in types.get_original_bases(klass):
            if typing.get_origin(base) is origin:
                return typing.get_args(base)
    return None


def _concrete(arg: Any) -> Any | None:
    if arg is None or arg is Any or isinstance(arg, TypeVar):
        return None
    return arg


def handler_kind(handler_type: Any) -> HandlerKind:
    """Which capability *handler_type* implements."""
    if inspect.isclass(handler_type):
        for kind, (capability, _) in _CAPABILITIES.items():
            if issubclass(handler_type, capability):
                return kind
    raise HandlerRegistrationError(handler_type, "is not a CommandHandler or QueryHandler")


def handled_request_type(handler_type: type, kind: HandlerKind) -> type:
    """The concrete command/query class *handler_type* handles."""
    capability, marker = _CAPABILITIES[kind]
    if not (inspect.isclass(handler_type) and issubclass(handler_type, capability)):
        raise HandlerRegistrationError(handler_type, f"is not a {capability.__name__}")
    if inspect.isabstract(handler_type):
        raise HandlerRegistrationError(handler_type, "is abstract; implement handle()")
    args = declared_type_args(handler_type, capability) or (None,)
    request_type = args[0]
    if not (inspect.isclass(request_type) and issubclass(request_type, marker)):
        raise HandlerRegistrationError(
            handler_type, f"does not declare a concrete {marker.__name__} type"
        )
    return request_type


def query_value_type(query_type: type) -> Any | None:
    """``V`` of ``Query[V]`` as declared by *query_type*, or ``None`` if unknown."""
    args = declared_type_args(query_type, Query)
    return _concrete(args[0]) if args else None


def handler_value_type(handler_type: type) -> Any | None:
    """``V`` of ``QueryHandler[Q, V]`` as declared by *handler_type*, or ``None``."""
    args = declared_type_args(handler_type, QueryHandler)
    return _concrete(args[1]) if args and len(args) > 1 else None


__all__ = [
    "CommandHandlerBinding",
    "HandlerBinding",
    "HandlerKind",
    "QueryHandlerBinding",
    "binding_key",
    "declared_type_args",
    "handled_request_type",
    "handler_kind",
    "handler_value_type",
    "query_value_type",
]
