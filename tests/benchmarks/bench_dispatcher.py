"""Benchmark: StandardCommandQueryDispatcher.dispatch.

Measures one dispatch with transient handlers (resolve wrapper, resolve
handler, invoke) against a direct ``handler.handle`` call, and with scoped
handlers reused inside one scope.
"""

from __future__ import annotations

import asyncio
import dataclasses

from cq_dispatch.application.cqrs import (
    Command,
    CommandHandler,
    CommandQueryDispatcher,
    Query,
    QueryHandler,
    command_query_dispatch,
)
from cq_dispatch.config.settings import DispatchSettings
from cq_dispatch.resolution import Container, ContainerBuilder, Scope


@dataclasses.dataclass
class _Touch(Command):
    pass


@dataclasses.dataclass
class _Echo(Query[str]):
    text: str


class _TouchHandler(CommandHandler[_Touch]):
    async def handle(self, command: _Touch) -> None:
        return None


class _EchoHandler(QueryHandler[_Echo, str]):
    async def handle(self, query: _Echo) -> str:
        return query.text


def _container(settings: DispatchSettings | None = None) -> Container:
    builder = ContainerBuilder()
    command_query_dispatch(builder, settings).standard(
        command_handlers=[_TouchHandler],
        query_handlers=[_EchoHandler],
    )
    return builder.build()


def test_direct_handler_call(benchmark, event_loop: asyncio.AbstractEventLoop) -> None:
    """Baseline: await the handler without any dispatch."""
    handler = _EchoHandler()
    query = _Echo("ok")

    result = benchmark(lambda: event_loop.run_until_complete(handler.handle(query)))
    assert result == "ok"


def test_dispatch_query_transient(benchmark, event_loop: asyncio.AbstractEventLoop) -> None:
    container = _container()
    dispatcher = event_loop.run_until_complete(container.resolve(CommandQueryDispatcher))
    query = _Echo("ok")

    result = benchmark(lambda: event_loop.run_until_complete(dispatcher.dispatch(query)))
    assert result == "ok"


def test_dispatch_command_scoped(benchmark, event_loop: asyncio.AbstractEventLoop) -> None:
    """Handler is cached in one child scope and reused by every dispatch."""
    container = _container(DispatchSettings(handler_lifetime="scoped"))
    scope = Scope(container, parent=container.root)
    dispatcher = event_loop.run_until_complete(scope.resolve(CommandQueryDispatcher))
    command = _Touch()

    try:
        result = benchmark(lambda: event_loop.run_until_complete(dispatcher.dispatch(command)))
    finally:
        event_loop.run_until_complete(scope.aclose())
    assert result is None
