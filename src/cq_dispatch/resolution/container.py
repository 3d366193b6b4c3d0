"""Resolution – in-process container with constructor injection.

Usage::

    builder = ContainerBuilder()
    builder.singleton(Counter)
    builder.transient(IncrementHandler)
    container = builder.build()

    async with container.create_scope() as scope:
        handler = await scope.resolve(IncrementHandler)

Classes are constructed by resolving the type hints of their ``__init__``
parameters; parameters that declare a default are left alone when their
annotation is not registered. Resolving :class:`ResolutionScope` (or
:class:`Scope`) yields the scope doing the resolving.
"""
from __future__ import annotations

import asyncio
import contextlib
import dataclasses
import inspect
import typing
from collections.abc import AsyncIterator
from contextvars import ContextVar
from typing import Any, TypeVar

from cq_dispatch.kernel.errors import (
    CircularDependencyError,
    ResolutionError,
    ScopeDisposedError,
    ServiceCreationError,
    ServiceNotRegisteredError,
)
from cq_dispatch.observability.logging import get_logger
from cq_dispatch.resolution.ports import DependencyRegistry, Factory, Lifetime, ResolutionScope

T = TypeVar("T")

logger = get_logger(__name__)

# Keys currently under construction in this task, outermost first.
_RESOLVING: ContextVar[tuple[Any, ...]] = ContextVar("_cqd_resolving", default=())

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


@dataclasses.dataclass(frozen=True)
class Registration:
    """One key bound to its construction strategy."""

    key: Any
    factory: Factory
    lifetime: Lifetime


class ContainerBuilder(DependencyRegistry):
    """Collects registrations; :meth:`build` freezes them into a :class:`Container`."""

    def __init__(self) -> None:
        self._registrations: dict[Any, Registration] = {}

    def register(
        self,
        key: Any,
        factory: Factory | None = None,
        lifetime: Lifetime = Lifetime.TRANSIENT,
    ) -> ContainerBuilder:
        if factory is None:
            if not inspect.isclass(key):
                raise TypeError(f"{key!r} is not a class; pass a factory to register it")
            factory = key
        self._registrations[key] = Registration(key, factory, Lifetime(lifetime))
        return self

    def instance(self, key: Any, value: Any) -> ContainerBuilder:
        """Bind *key* to an already constructed *value*."""
        return self.register(key, lambda: value, Lifetime.SINGLETON)

    def __contains__(self, key: Any) -> bool:
        return key in self._registrations

    def build(self) -> Container:
        container = Container(dict(self._registrations))
        logger.debug("container_built", registrations=len(self._registrations))
        return container


class Container:
    """Frozen set of registrations plus the root scope that owns singletons."""

    def __init__(self, registrations: dict[Any, Registration]) -> None:
        self._registrations = registrations
        self._root = Scope(self)

    @property
    def root(self) -> Scope:
        return self._root

    def registration(self, key: Any) -> Registration | None:
        return self._registrations.get(key)

    def is_registered(self, key: Any) -> bool:
        return key in self._registrations

    async def resolve(self, key: type[T] | Any) -> T:
        """Resolve *key* from the root scope."""
        return await self._root.resolve(key)

    @contextlib.asynccontextmanager
    async def create_scope(self) -> AsyncIterator[Scope]:
        """Open a child scope; it is closed when the block exits."""
        scope = Scope(self, parent=self._root)
        try:
            yield scope
        finally:
            await scope.aclose()

    async def aclose(self) -> None:
        await self._root.aclose()


class Scope(ResolutionScope):
    """Resolves keys and caches scoped instances for its own lifetime."""

    def __init__(self, container: Container, parent: Scope | None = None) -> None:
        self._container = container
        self._parent = parent
        self._instances: dict[Any, Any] = {}
        self._locks: dict[Any, asyncio.Lock] = {}
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def parent(self) -> Scope | None:
        return self._parent

    async def resolve(self, key: type[T] | Any) -> T:
        if self._closed:
            raise ScopeDisposedError(key)
        if key is ResolutionScope or key is Scope:
            return self  # type: ignore[return-value]

        registration = self._container.registration(key)
        if registration is None:
            raise ServiceNotRegisteredError(key)

        chain = _RESOLVING.get()
        if key in chain:
            raise CircularDependencyError((*chain, key))

        match registration.lifetime:
            case Lifetime.TRANSIENT:
                return await self._create(registration)
            case Lifetime.SCOPED:
                return await self._cached(registration)
            case Lifetime.SINGLETON:
                root = self._container.root
                if root.closed:
                    raise ScopeDisposedError(key)
                return await root._cached(registration)

    async def aclose(self) -> None:
        """Close instances this scope cached, newest first, then close the scope."""
        if self._closed:
            return
        self._closed = True
        instances = list(self._instances.values())
        self._instances.clear()
        first_error: Exception | None = None
        for instance in reversed(instances):
            try:
                await self._dispose(instance)
            except Exception as exc:  # noqa: BLE001
                if first_error is None:
                    first_error = exc
                logger.warning(
                    "scope_instance_close_failed",
                    instance=type(instance).__qualname__,
                    error=repr(exc),
                )
        logger.debug("scope_closed", instances=len(instances))
        if first_error is not None:
            raise first_error

    @staticmethod
    async def _dispose(instance: Any) -> None:
        if callable(aclose := getattr(instance, "aclose", None)):
            await aclose()
        elif callable(close := getattr(instance, "close", None)):
            result = close()
            if inspect.isawaitable(result):
                await result

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    async def _cached(self, registration: Registration) -> Any:
        key = registration.key
        if key in self._instances:
            return self._instances[key]
        async with self._locks.setdefault(key, asyncio.Lock()):
            if key not in self._instances:
                self._instances[key] = await self._create(registration)
        return self._instances[key]

    async def _create(self, registration: Registration) -> Any:
        token = _RESOLVING.set((*_RESOLVING.get(), registration.key))
        try:
            return await self._invoke(registration.factory)
        except ResolutionError:
            raise
        except Exception as exc:
            raise ServiceCreationError(registration.key, exc) from exc
        finally:
            _RESOLVING.reset(token)

    async def _invoke(self, factory: Factory) -> Any:
        if inspect.isclass(factory):
            return factory(**await self._constructor_arguments(factory))
        result = factory(self) if inspect.signature(factory).parameters else factory()
        if inspect.isawaitable(result):
            result = await result
        return result

    async def _constructor_arguments(self, cls: type) -> dict[str, Any]:
        init = cls.__init__
        if init is object.__init__:
            return {}
        hints = typing.get_type_hints(init)
        parameters = list(inspect.signature(init).parameters.values())[1:]
        kwargs: dict[str, Any] = {}
        for param in parameters:
            if param.kind in _VARIADIC:
                continue
            annotation = hints.get(param.name)
            has_default = param.default is not inspect.Parameter.empty
            if annotation is None:
                if has_default:
                    continue
                raise ResolutionError(
                    f"Cannot inject {cls.__qualname__}.{param.name}: parameter has no annotation",
                    key=cls,
                )
            if has_default and not self._can_resolve(annotation):
                continue
            kwargs[param.name] = await self.resolve(annotation)
        return kwargs

    def _can_resolve(self, key: Any) -> bool:
        return key is ResolutionScope or key is Scope or self._container.is_registered(key)


__all__ = ["Container", "ContainerBuilder", "Registration", "Scope"]
