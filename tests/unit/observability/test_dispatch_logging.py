"""Unit tests for structlog configuration helpers."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from cq_dispatch.config.settings import DispatchSettings
from cq_dispatch.observability.logging import JsonLoggerFactory, configure_logging, get_logger
from cq_dispatch.resolution import ContainerBuilder


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestJsonLoggerFactory:
    def test_installs_single_root_handler(self, restore_logging: None) -> None:
        JsonLoggerFactory.configure(level=logging.DEBUG)
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
        assert root.level == logging.DEBUG

    def test_configure_logging_from_settings(self, restore_logging: None) -> None:
        configure_logging(DispatchSettings(log_level="warning", json_logs=False))
        assert logging.getLogger().level == logging.WARNING
        assert structlog.is_configured()


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("cq_dispatch.test", component="registry").info("bound")
        assert logs == [{"component": "registry", "event": "bound", "log_level": "info"}]


class TestLibraryLogEvents:
    def test_container_build_logged(self) -> None:
        with capture_logs() as logs:
            ContainerBuilder().singleton(int, lambda: 1).build()
        assert {"event": "container_built", "registrations": 1, "log_level": "debug"} in logs
