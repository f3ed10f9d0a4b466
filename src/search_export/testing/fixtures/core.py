"""Testing fixtures – a fully faked CoreSetup and a saved-search panel."""
from __future__ import annotations

import pytest

from search_export.application.embeddables import (
    EmbeddableInput,
    InspectorAdapters,
    SavedSearch,
    SearchEmbeddable,
    StaticSearchSource,
    TimeRange,
)
from search_export.config import ExportSettings
from search_export.plugin import CoreSetup
from search_export.testing.fakes import (
    FakeClock,
    InMemoryBlobSaver,
    InMemoryNotifier,
    InMemoryUiSettings,
    RecordingHttpClient,
)

SEARCH_BODY = {
    "sort": [{"@timestamp": {"order": "desc"}}],
    "docvalue_fields": [{"field": "@timestamp", "format": "date_time"}],
    "query": {"bool": {"filter": [{"match_all": {}}]}},
    "size": 500,
}


@pytest.fixture
def fake_core() -> CoreSetup:
    """CoreSetup wired entirely with in-memory fakes (timezone pinned to UTC)."""
    return CoreSetup(
        http=RecordingHttpClient(),
        notifier=InMemoryNotifier(),
        ui_settings=InMemoryUiSettings({"dateFormat:tz": "UTC"}),
        blob_saver=InMemoryBlobSaver(),
        settings=ExportSettings(blob_saver="memory"),
        clock=FakeClock(),
    )


@pytest.fixture
def search_panel() -> SearchEmbeddable:
    """A saved-search panel that has already run its search."""
    adapters = InspectorAdapters()
    adapters.requests.start("data", SEARCH_BODY)
    return SearchEmbeddable(
        input=EmbeddableInput(time_range=TimeRange(from_="now-15m", to="now")),
        saved_search=SavedSearch(
            id="2b9f6c40", title="Failed logins", search_source=StaticSearchSource(SEARCH_BODY)
        ),
        inspector_adapters=adapters,
    )


__all__ = ["SEARCH_BODY", "fake_core", "search_panel"]
