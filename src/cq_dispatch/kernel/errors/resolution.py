"""Resolution errors – raised by the dependency-resolution collaborator."""

from __future__ import annotations

from typing import Any

from cq_dispatch.kernel.errors.base import InfrastructureError, type_name


class ResolutionError(InfrastructureError):
    """An instance could not be produced for a registry key."""

    default_code = "resolution_error"

    def __init__(self, message: str, *, key: Any = None, **kwargs: Any) -> None:
        detail = dict(kwargs.pop("detail", None) or {})
        if key is not None:
            detail.setdefault("key", type_name(key))
        super().__init__(message, detail=detail, **kwargs)
        self.key = key


class ServiceNotRegisteredError(ResolutionError):
    """Nothing is bound under the requested key."""

    default_code = "service_not_registered"

    def __init__(self, key: Any, **kwargs: Any) -> None:
        super().__init__(f"No registration for {type_name(key)}", key=key, **kwargs)


class ServiceCreationError(ResolutionError):
    """A constructor or factory failed while producing an instance."""

    default_code = "service_creation_failed"

    def __init__(self, key: Any, cause: BaseException, **kwargs: Any) -> None:
        super().__init__(
            f"Failed to create {type_name(key)}: {cause}",
            key=key,
            cause=cause,
            **kwargs,
        )


class CircularDependencyError(ResolutionError):
    """A key depends on itself through its constructor chain."""

    default_code = "circular_dependency"

    def __init__(self, chain: tuple[Any, ...], **kwargs: Any) -> None:
        path = " -> ".join(type_name(k) for k in chain)
        super().__init__(
            f"Circular dependency: {path}",
            key=chain[-1],
            detail={"chain": [type_name(k) for k in chain]},
            **kwargs,
        )
        self.chain = chain


class ScopeDisposedError(ResolutionError):
    """Resolution was attempted on a closed scope."""

    default_code = "scope_disposed"

    def __init__(self, key: Any = None, **kwargs: Any) -> None:
        super().__init__("Scope is closed", key=key, **kwargs)


__all__ = [
    "CircularDependencyError",
    "ResolutionError",
    "ScopeDisposedError",
    "ServiceCreationError",
    "ServiceNotRegisteredError",
]
