"""Application embeddables – dashboard panel models."""
from search_export.application.embeddables.models import (
    SEARCH_EMBEDDABLE_TYPE,
    Embeddable,
    EmbeddableInput,
    GenericEmbeddable,
    InspectorAdapters,
    RequestAdapter,
    SavedSearch,
    SavedSearchPanel,
    SearchEmbeddable,
    SearchSource,
    StaticSearchSource,
    TimeRange,
    ViewMode,
    is_saved_search_embeddable,
)

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
