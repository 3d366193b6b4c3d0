"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError
    │   └── DispatchError                (dispatch.py)
    │       └── HandlerNotFoundError
    ├── InfrastructureError
    │   └── ResolutionError              (resolution.py)
    │       ├── ServiceNotRegisteredError
    │       ├── ServiceCreationError
    │       ├── CircularDependencyError
    │       └── ScopeDisposedError
    └── WiringError (also TypeError)     (dispatch.py)
        ├── HandlerRegistrationError
        ├── BindingMismatchError
        └── InvalidRequestError
"""

from cq_dispatch.kernel.errors.base import ApplicationError, BaseError, InfrastructureError
from cq_dispatch.kernel.errors.dispatch import (
    BindingMismatchError,
    DispatchError,
    HandlerNotFoundError,
    HandlerRegistrationError,
    InvalidRequestError,
    WiringError,
)
from cq_dispatch.kernel.errors.resolution import (
    CircularDependencyError,
    ResolutionError,
    ScopeDisposedError,
    ServiceCreationError,
    ServiceNotRegisteredError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "BindingMismatchError",
    "CircularDependencyError",
    "DispatchError",
    "HandlerNotFoundError",
    "HandlerRegistrationError",
    "InfrastructureError",
    "InvalidRequestError",
    "ResolutionError",
    "ScopeDisposedError",
    "ServiceCreationError",
    "ServiceNotRegisteredError",
    "WiringError",
]
