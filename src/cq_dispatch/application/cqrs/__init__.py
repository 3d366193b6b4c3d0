"""Application CQRS – commands, queries, handler bindings and the dispatcher."""
from cq_dispatch.application.cqrs.bindings import (
    CommandHandlerBinding,
    HandlerBinding,
    HandlerKind,
    QueryHandlerBinding,
    binding_key,
)
from cq_dispatch.application.cqrs.commands import Command, CommandHandler
from cq_dispatch.application.cqrs.dispatcher import (
    CommandQueryDispatcher,
    StandardCommandQueryDispatcher,
)
from cq_dispatch.application.cqrs.queries import Query, QueryHandler
from cq_dispatch.application.cqrs.registration import (
    CommandQueryDispatchRegistrator,
    command_query_dispatch,
)

__all__ = [
    "Command",
    "CommandHandler",
    "CommandHandlerBinding",
    "CommandQueryDispatchRegistrator",
    "CommandQueryDispatcher",
    "HandlerBinding",
    "HandlerKind",
    "Query",
    "QueryHandler",
    "QueryHandlerBinding",
    "StandardCommandQueryDispatcher",
    "binding_key",
    "command_query_dispatch",
]
