"""Dispatch errors – missing handlers and wiring defects."""

from __future__ import annotations

from typing import Any

from cq_dispatch.kernel.errors.base import ApplicationError, BaseError, type_name


class DispatchError(ApplicationError):
    """A request could not be routed to a handler."""

    default_code = "dispatch_error"


class HandlerNotFoundError(DispatchError):
    """No handler is bound for the request's concrete type."""

    default_code = "handler_not_found"

    def __init__(self, request_type: type, **kwargs: Any) -> None:
        super().__init__(
            f"No handler registered for {type_name(request_type)}",
            detail={"request_type": type_name(request_type)},
            **kwargs,
        )
        self.request_type = request_type


class WiringError(BaseError, TypeError):
    """Programming defect in how handlers were declared or registered.

    Also a :class:`TypeError` so it is never mistaken for a runtime condition.
    """

    default_code = "wiring_error"


class HandlerRegistrationError(WiringError):
    """A handler type cannot be bound (not a handler, abstract, no request type)."""

    default_code = "handler_registration_error"

    def __init__(self, handler_type: Any, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Cannot register {type_name(handler_type)}: {reason}",
            detail={"handler_type": type_name(handler_type), "reason": reason},
            **kwargs,
        )
        self.handler_type = handler_type
        self.reason = reason


class BindingMismatchError(WiringError):
    """A handler binding received a request of a type it was not bound to."""

    default_code = "binding_mismatch"

    def __init__(self, expected: type, actual: type, **kwargs: Any) -> None:
        super().__init__(
            f"Binding for {type_name(expected)} received {type_name(actual)}",
            detail={"expected": type_name(expected), "actual": type_name(actual)},
            **kwargs,
        )
        self.expected = expected
        self.actual = actual


class InvalidRequestError(WiringError):
    """The dispatched value is neither a Command nor a Query."""

    default_code = "invalid_request"

    def __init__(self, request: object, **kwargs: Any) -> None:
        super().__init__(
            f"{type_name(type(request))} is neither a Command nor a Query",
            **kwargs,
        )
        self.request = request


__all__ = [
    "BindingMismatchError",
    "DispatchError",
    "HandlerNotFoundError",
    "HandlerRegistrationError",
    "InvalidRequestError",
    "WiringError",
]
