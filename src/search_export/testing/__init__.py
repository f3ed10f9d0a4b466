"""Testing support – fakes, fixtures and property-based generators.

Import in your ``conftest.py``::

    pytest_plugins = ["search_export.testing.fixtures"]
"""

from search_export.testing.fakes import (
    FakeClock,
    InMemoryBlobSaver,
    InMemoryNotifier,
    InMemoryUiSettings,
    RecordingHttpClient,
)

__all__ = [
    "FakeClock",
    "InMemoryBlobSaver",
    "InMemoryNotifier",
    "InMemoryUiSettings",
    "RecordingHttpClient",
]
