"""Application – command/query dispatch."""

from cq_dispatch.application.cqrs import (
    Command,
    CommandHandler,
    CommandQueryDispatcher,
    Query,
    QueryHandler,
    StandardCommandQueryDispatcher,
    command_query_dispatch,
)

__all__ = [
    "Command",
    "CommandHandler",
    "CommandQueryDispatcher",
    "Query",
    "QueryHandler",
    "StandardCommandQueryDispatcher",
    "command_query_dispatch",
]
