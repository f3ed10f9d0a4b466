"""Application embeddables – the panel state the export action reads."""
from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, runtime_checkable

__all__ = [
    "SEARCH_EMBEDDABLE_TYPE",
    "Embeddable",
    "EmbeddableInput",
    "GenericEmbeddable",
    "InspectorAdapters",
    "RequestAdapter",
    "SavedSearch",
    "SavedSearchPanel",
    "SearchEmbeddable",
    "SearchSource",
    "StaticSearchSource",
    "TimeRange",
    "ViewMode",
    "is_saved_search_embeddable",
]

SEARCH_EMBEDDABLE_TYPE = "search"


class ViewMode(str, Enum):
    VIEW = "view"
    EDIT = "edit"


@dataclass(frozen=True)
class TimeRange:
    """Raw (unresolved) bounds as the dashboard stores them, e.g. ``now-15m``."""

    from_: str
    to: str


@dataclass(frozen=True)
class EmbeddableInput:
    time_range: TimeRange
    view_mode: ViewMode = ViewMode.VIEW


@runtime_checkable
class SearchSource(Protocol):
    """Port: produces the Elasticsearch request body behind a saved search."""

    def get_search_request_body(self) -> dict[str, Any]: ...


@dataclass
class StaticSearchSource:
    """SearchSource backed by a fixed request body."""

    body: dict[str, Any] = field(default_factory=dict)

    def get_search_request_body(self) -> dict[str, Any]:
        return copy.deepcopy(self.body)


@dataclass(frozen=True)
class SavedSearch:
    id: str
    title: str
    search_source: SearchSource = field(default_factory=StaticSearchSource)


@dataclass
class RequestAdapter:
    """Records the search requests a panel has issued (the inspector "Requests" view)."""

    requests: list[dict[str, Any]] = field(default_factory=list)

    def start(self, name: str, request: dict[str, Any] | None = None) -> None:
        self.requests.append({"name": name, "request": request or {}})

    def reset(self) -> None:
        self.requests.clear()


@dataclass
class InspectorAdapters:
    requests: RequestAdapter = field(default_factory=RequestAdapter)


@runtime_checkable
class Embeddable(Protocol):
    """Port: a renderable dashboard panel."""

    type: str

    def get_input(self) -> EmbeddableInput: ...


@runtime_checkable
class SavedSearchPanel(Protocol):
    """Port: a panel backed by a saved search."""

    type: str

    def get_input(self) -> EmbeddableInput: ...
    def get_saved_search(self) -> SavedSearch: ...
    def get_inspector_adapters(self) -> InspectorAdapters | None: ...


@dataclass
class GenericEmbeddable:
    """Any non-search panel (visualisation, markdown, ...)."""

    type: str
    input: EmbeddableInput

    def get_input(self) -> EmbeddableInput:
        return self.input


@dataclass
class SearchEmbeddable:
    """A saved-search result panel."""

    input: EmbeddableInput
    saved_search: SavedSearch
    inspector_adapters: InspectorAdapters | None = field(default_factory=InspectorAdapters)
    type: str = SEARCH_EMBEDDABLE_TYPE

    def get_input(self) -> EmbeddableInput:
        return self.input

    def get_saved_search(self) -> SavedSearch:
        return self.saved_search

    def get_inspector_adapters(self) -> InspectorAdapters | None:
        return self.inspector_adapters


def is_saved_search_embeddable(embeddable: Any) -> bool:
    return getattr(embeddable, "type", None) == SEARCH_EMBEDDABLE_TYPE and isinstance(
        embeddable, SavedSearchPanel
    )
