"""Shared fixtures for the unit and benchmark suites."""

from __future__ import annotations

from cq_dispatch.testing.fixtures import (  # noqa: F401
    container_builder,
    dispatch_settings,
    recording_registry,
)
