"""Testing fakes – in-memory doubles for the host services."""
from search_export.application.downloads import InMemoryBlobSaver
from search_export.application.notifications import InMemoryNotifier
from search_export.application.ui_settings import InMemoryUiSettings
from search_export.kernel.time import FrozenClock
from search_export.testing.fakes.clock import FakeClock
from search_export.testing.fakes.http import RecordedRequest, RecordingHttpClient

__all__ = [
    "FakeClock",
    "FrozenClock",
    "InMemoryBlobSaver",
    "InMemoryNotifier",
    "InMemoryUiSettings",
    "RecordedRequest",
    "RecordingHttpClient",
]
