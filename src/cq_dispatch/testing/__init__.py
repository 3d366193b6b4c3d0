"""Testing support – registry doubles and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["cq_dispatch.testing.fixtures"]
"""

from cq_dispatch.testing.fakes import RecordingRegistry

__all__ = ["RecordingRegistry"]
