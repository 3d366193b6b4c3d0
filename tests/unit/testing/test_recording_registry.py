"""Unit tests for the RecordingRegistry double and shipped fixtures."""

from __future__ import annotations

import pytest

from cq_dispatch.resolution import ContainerBuilder, Lifetime
from cq_dispatch.testing import RecordingRegistry


class Widget:
    pass


class TestRecordingRegistry:
    def test_records_calls_in_order(self, recording_registry: RecordingRegistry) -> None:
        recording_registry.singleton(Widget)
        recording_registry.register("answer", lambda: 42)
        assert recording_registry.keys() == [Widget, "answer"]
        assert recording_registry.registrations[0] == (Widget, None, Lifetime.SINGLETON)

    def test_latest_registration_reported(self, recording_registry: RecordingRegistry) -> None:
        recording_registry.transient(Widget)
        recording_registry.scoped(Widget, Widget)
        assert recording_registry.lifetime_of(Widget) is Lifetime.SCOPED
        assert recording_registry.factory_for(Widget) is Widget

    def test_unknown_key(self, recording_registry: RecordingRegistry) -> None:
        with pytest.raises(KeyError):
            recording_registry.lifetime_of(Widget)

    def test_clear(self, recording_registry: RecordingRegistry) -> None:
        recording_registry.transient(Widget)
        recording_registry.clear()
        assert recording_registry.registrations == []


class TestFixtures:
    def test_container_builder_is_empty(self, container_builder: ContainerBuilder) -> None:
        assert Widget not in container_builder
