"""
cq_dispatch – type-indexed command/query dispatch.

Import path convention::

    from cq_dispatch.application.cqrs import Command, CommandHandler, command_query_dispatch
    from cq_dispatch.resolution import ContainerBuilder
    from cq_dispatch.kernel.errors import HandlerNotFoundError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
