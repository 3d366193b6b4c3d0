"""Observability – structlog configuration and logger helpers."""
from cq_dispatch.observability.logging.factory import JsonLoggerFactory, configure_logging
from cq_dispatch.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "configure_logging", "get_logger"]
