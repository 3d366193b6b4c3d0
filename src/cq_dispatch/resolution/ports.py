"""Resolution ports – the registry/scope boundary the dispatch core consumes."""
from __future__ import annotations

import abc
import enum
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

T = TypeVar("T")

Factory = type[Any] | Callable[..., Any] | Callable[..., Awaitable[Any]]


class Lifetime(enum.StrEnum):
    """How long a resolved instance is reused."""

    TRANSIENT = "transient"
    SCOPED = "scoped"
    SINGLETON = "singleton"


class ResolutionScope(abc.ABC):
    """Port: produce instances for registry keys within one scope."""

    @abc.abstractmethod
    async def resolve(self, key: type[T] | Any) -> T:
        """Return an instance for *key*.

        Raises :class:`~cq_dispatch.kernel.errors.ResolutionError` when nothing
        is bound or construction fails.
        """


class DependencyRegistry(abc.ABC):
    """Port: bind registry keys to construction strategies."""

    @abc.abstractmethod
    def register(
        self,
        key: Any,
        factory: Factory | None = None,
        lifetime: Lifetime = Lifetime.TRANSIENT,
    ) -> Any:
        """Bind *key* to *factory*; re-registering a key overwrites it."""

    def transient(self, key: Any, factory: Factory | None = None) -> Any:
        return self.register(key, factory, Lifetime.TRANSIENT)

    def scoped(self, key: Any, factory: Factory | None = None) -> Any:
        return self.register(key, factory, Lifetime.SCOPED)

    def singleton(self, key: Any, factory: Factory | None = None) -> Any:
        return self.register(key, factory, Lifetime.SINGLETON)


__all__ = ["DependencyRegistry", "Factory", "Lifetime", "ResolutionScope"]
