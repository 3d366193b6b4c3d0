"""Testing fakes – in-memory doubles for resolution ports."""
from cq_dispatch.testing.fakes.registry import RecordingRegistry

__all__ = ["RecordingRegistry"]
