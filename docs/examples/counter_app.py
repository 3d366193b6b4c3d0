"""Counter example: one command, one query, wired through the container.

Run with::

    python docs/examples/counter_app.py

Set ``CQD_HANDLER_LIFETIME=scoped`` to share handler instances within a
scope, or ``CQD_JSON_LOGS=false`` for console-rendered registration logs.
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
from cq_dispatch.config import DispatchSettings, EnvSettingsLoader
from cq_dispatch.observability.logging import configure_logging, get_logger
from cq_dispatch.resolution import ContainerBuilder

logger = get_logger(__name__)


class Counter:
    def __init__(self) -> None:
        self.value = 0


@dataclasses.dataclass
class Increment(Command):
    by: int


@dataclasses.dataclass
class Double(Query[int]):
    input: int


class IncrementHandler(CommandHandler[Increment]):
    def __init__(self, counter: Counter) -> None:
        self._counter = counter

    async def handle(self, command: Increment) -> None:
        self._counter.value += command.by


class DoubleHandler(QueryHandler[Double, int]):
    async def handle(self, query: Double) -> int:
        return query.input * 2


async def main() -> None:
    settings = EnvSettingsLoader().load(DispatchSettings)
    configure_logging(settings)

    builder = ContainerBuilder().singleton(Counter)
    command_query_dispatch(builder, settings).standard(
        command_handlers=[IncrementHandler],
        query_handlers=[DoubleHandler],
    )
    container = builder.build()

    async with container.create_scope() as scope:
        dispatcher = await scope.resolve(CommandQueryDispatcher)
        await dispatcher.dispatch(Increment(by=100))
        counter = await scope.resolve(Counter)
        doubled = await dispatcher.dispatch(Double(input=counter.value))

    logger.info("counter_example_done", counter=counter.value, doubled=doubled)
    await container.aclose()


if __name__ == "__main__":
    asyncio.run(main())
