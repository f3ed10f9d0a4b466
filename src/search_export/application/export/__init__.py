"""Application export – request body, reporting client, workbook conversion."""
from search_export.application.export.reporting import ReportClient
from search_export.application.export.request import (
    STATE_KEYS,
    TimeWindow,
    build_request_body,
    get_search_request_body,
    pick_state,
    resolve_time_window,
)
from search_export.application.export.workbook import csv_to_workbook, sheet_title

__all__ = [
    "STATE_KEYS",
    "ReportClient",
    "TimeWindow",
    "build_request_body",
    "csv_to_workbook",
    "get_search_request_body",
    "pick_state",
    "resolve_time_window",
    "sheet_title",
]
