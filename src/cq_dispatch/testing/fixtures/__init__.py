"""Testing fixtures – load with ``pytest_plugins = ["cq_dispatch.testing.fixtures"]``."""
from cq_dispatch.testing.fixtures.resolution import (
    container_builder,
    dispatch_settings,
    recording_registry,
)

__all__ = ["container_builder", "dispatch_settings", "recording_registry"]
