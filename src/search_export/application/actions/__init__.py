"""Application actions – the export action and the trigger registry it plugs into."""
from search_export.application.actions.base import ActionContext, ActionDefinition, RequestState
from search_export.application.actions.excel_report import (
    EXCEL_REPORTING_ACTION,
    FAILED_TOAST,
    STARTED_TOAST,
    ExcelReportPanelAction,
)
from search_export.application.actions.registry import CONTEXT_MENU_TRIGGER, InMemoryUiActions, UiActions

__all__ = [
    "CONTEXT_MENU_TRIGGER",
    "EXCEL_REPORTING_ACTION",
    "FAILED_TOAST",
    "STARTED_TOAST",
    "ActionContext",
    "ActionDefinition",
    "ExcelReportPanelAction",
    "InMemoryUiActions",
    "RequestState",
    "UiActions",
]
