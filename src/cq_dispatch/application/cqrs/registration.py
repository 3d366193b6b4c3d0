"""Application CQRS – fluent registration of the dispatcher and its handlers.

Usage::

    builder = ContainerBuilder()
    builder.singleton(Counter)

    command_query_dispatch(builder).standard(
        command_handlers=[IncrementHandler],
        query_handlers=[DoubleHandler],
    )

    container = builder.build()
    dispatcher = await container.resolve(CommandQueryDispatcher)
    await dispatcher.dispatch(Increment(by=100))

Registering a second handler for a request type replaces the first; there is
no conflict detection.
"""
from __future__ import annotations

import inspect
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from cq_dispatch.application.cqrs.bindings import (
    CommandHandlerBinding,
    HandlerBinding,
    HandlerKind,
    QueryHandlerBinding,
    handled_request_type,
    handler_kind,
    handler_value_type,
    query_value_type,
)
from cq_dispatch.application.cqrs.dispatcher import (
    CommandQueryDispatcher,
    StandardCommandQueryDispatcher,
)
from cq_dispatch.config.settings import DispatchSettings
from cq_dispatch.kernel.errors import HandlerRegistrationError
from cq_dispatch.observability.logging import get_logger
from cq_dispatch.resolution.ports import DependencyRegistry, Lifetime

logger = get_logger(__name__)


def _name(tp: type) -> str:
    return f"{tp.__module__}.{tp.__qualname__}"


class CommandQueryDispatchRegistrator:
    """Binds a dispatcher and command/query handlers into a :class:`DependencyRegistry`.

    Every method returns the registrator so calls can be chained.
    """

    def __init__(
        self,
        registry: DependencyRegistry,
        settings: DispatchSettings | None = None,
    ) -> None:
        self._registry = registry
        self._settings = settings or DispatchSettings()
        self._bindings: dict[type, HandlerBinding] = {}
        self._dispatcher_type: type[CommandQueryDispatcher] | None = None

    @property
    def bindings(self) -> Mapping[type, HandlerBinding]:
        """Request type -> binding, as registered through this registrator."""
        return MappingProxyType(self._bindings)

    @property
    def dispatcher_type(self) -> type[CommandQueryDispatcher] | None:
        return self._dispatcher_type

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_dispatcher(
        self, dispatcher_type: type[CommandQueryDispatcher]
    ) -> CommandQueryDispatchRegistrator:
        """Bind *dispatcher_type* as the :class:`CommandQueryDispatcher` implementation."""
        if not (
            inspect.isclass(dispatcher_type)
            and issubclass(dispatcher_type, CommandQueryDispatcher)
        ):
            raise HandlerRegistrationError(dispatcher_type, "is not a CommandQueryDispatcher")
        if self._dispatcher_type is not None:
            logger.warning(
                "dispatcher_already_registered",
                previous=_name(self._dispatcher_type),
                replacement=_name(dispatcher_type),
            )
        self._registry.register(
            CommandQueryDispatcher,
            dispatcher_type,
            self._settings.dispatcher_lifetime_value,
        )
        self._dispatcher_type = dispatcher_type
        logger.debug("dispatcher_registered", dispatcher=_name(dispatcher_type))
        return self

    def register_command_handler(self, handler_type: type) -> CommandQueryDispatchRegistrator:
        """Bind *handler_type* under the command type it declares."""
        command_type = handled_request_type(handler_type, HandlerKind.COMMAND)
        return self._bind(
            HandlerBinding(HandlerKind.COMMAND, command_type, handler_type),
            CommandHandlerBinding.factory(command_type, handler_type),
        )

    def register_query_handler(self, handler_type: type) -> CommandQueryDispatchRegistrator:
        """Bind *handler_type* under the query type it declares.

        When both the query and the handler name a concrete value type they
        must be the same type.
        """
        query_type = handled_request_type(handler_type, HandlerKind.QUERY)
        declared = query_value_type(query_type)
        produced = handler_value_type(handler_type)
        if declared is not None and produced is not None and declared != produced:
            raise HandlerRegistrationError(
                handler_type,
                f"returns {produced!r} but {query_type.__qualname__} expects {declared!r}",
            )
        return self._bind(
            HandlerBinding(HandlerKind.QUERY, query_type, handler_type),
            QueryHandlerBinding.factory(query_type, handler_type),
        )

    def register_handler(self, handler_type: type) -> CommandQueryDispatchRegistrator:
        """Bind a command or query handler, whichever *handler_type* is."""
        if handler_kind(handler_type) is HandlerKind.COMMAND:
            return self.register_command_handler(handler_type)
        return self.register_query_handler(handler_type)

    def standard(
        self,
        command_handlers: Iterable[type] = (),
        query_handlers: Iterable[type] = (),
    ) -> CommandQueryDispatchRegistrator:
        """Register :class:`StandardCommandQueryDispatcher` and every handler, in order."""
        self.register_dispatcher(StandardCommandQueryDispatcher)
        for handler_type in command_handlers:
            self.register_command_handler(handler_type)
        for handler_type in query_handlers:
            self.register_query_handler(handler_type)
        return self

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _bind(self, binding: HandlerBinding, factory: Any) -> CommandQueryDispatchRegistrator:
        self._registry.register(
            binding.handler_type,
            binding.handler_type,
            self._settings.handler_lifetime_value,
        )
        # Wrapper is always transient; reuse follows the handler's lifetime.
        self._registry.register(binding.key, factory, Lifetime.TRANSIENT)

        previous = self._bindings.get(binding.request_type)
        if previous is not None and previous.handler_type is not binding.handler_type:
            logger.debug(
                "handler_binding_replaced",
                request_type=_name(binding.request_type),
                previous=_name(previous.handler_type),
                replacement=_name(binding.handler_type),
            )
        self._bindings[binding.request_type] = binding
        logger.debug(
            "handler_bound",
            kind=binding.kind.value,
            request_type=_name(binding.request_type),
            handler=_name(binding.handler_type),
        )
        return self


def command_query_dispatch(
    registry: DependencyRegistry,
    settings: DispatchSettings | None = None,
) -> CommandQueryDispatchRegistrator:
    """Start a fluent registration against *registry*."""
    return CommandQueryDispatchRegistrator(registry, settings)


__all__ = ["CommandQueryDispatchRegistrator", "command_query_dispatch"]
