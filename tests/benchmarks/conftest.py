"""conftest.py for benchmarks.

The ``event_loop`` fixture is session-scoped so every benchmark shares one
asyncio loop and loop start-up stays out of the timings.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterator

import pytest


@pytest.fixture(scope="session")
def event_loop() -> Iterator[asyncio.AbstractEventLoop]:
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()
