"""Kernel – framework-agnostic building blocks."""

from cq_dispatch.kernel.errors import (
    ApplicationError,
    BaseError,
    DispatchError,
    HandlerNotFoundError,
    InfrastructureError,
    ResolutionError,
    WiringError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DispatchError",
    "HandlerNotFoundError",
    "InfrastructureError",
    "ResolutionError",
    "WiringError",
]
