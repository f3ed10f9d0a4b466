"""Application actions – "Download as Excel" for saved-search panels.

Flow of :meth:`ExcelReportPanelAction.execute`:

1. reject non saved-search panels with :class:`IncompatibleActionError`;
2. drop the call while an export is in flight;
3. resolve the time range (invalid bounds end in the failure toast);
4. mark in flight, raise the "started" toast, POST the generate request;
5. save ``<title>.csv`` (and ``<title>.xlsx`` when enabled) or raise the
   failure toast. Either way the action is idle again afterwards.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable

import structlog

from search_export.application.actions.base import ActionContext, RequestState
from search_export.application.downloads import (
    CSV_CONTENT_TYPE,
    XLSX_CONTENT_TYPE,
    Blob,
    BlobSaver,
)
from search_export.application.embeddables import (
    SEARCH_EMBEDDABLE_TYPE,
    SavedSearch,
    SavedSearchPanel,
    ViewMode,
    is_saved_search_embeddable,
)
from search_export.application.export import (
    ReportClient,
    build_request_body,
    csv_to_workbook,
    get_search_request_body,
    pick_state,
    resolve_time_window,
)
from search_export.application.notifications import Notifier, Toast, ToastColor
from search_export.application.ui_settings import DATE_FORMAT_DOW, DATE_FORMAT_TZ, UiSettings
from search_export.kernel.errors import (
    BaseError,
    IncompatibleActionError,
    InvalidTimeRangeError,
    ReportGenerationError,
)
from search_export.kernel.time import (
    Clock,
    SystemClock,
    detect_timezone,
    resolve_timezone,
    week_start_from_setting,
)
from search_export.observability.logging import get_logger

if TYPE_CHECKING:
    from search_export.plugin import CoreSetup

__all__ = [
    "EXCEL_REPORTING_ACTION",
    "FAILED_TOAST",
    "STARTED_TOAST",
    "ExcelReportPanelAction",
]

logger = get_logger(__name__)

EXCEL_REPORTING_ACTION = "downloadExcelReport"

STARTED_TOAST = Toast(
    title="Excel Download Started",
    text="Your Excel will download momentarily.",
    test_subj="excelDownloadStarted",
    color=ToastColor.SUCCESS,
)
FAILED_TOAST = Toast(
    title="Excel download failed",
    text="We couldn't generate your Excel at this time.",
    test_subj="downloadExcelFail",
    color=ToastColor.DANGER,
)


class ExcelReportPanelAction:
    """Panel context-menu action that exports a saved search.

    At most one export is outstanding per action instance: while
    :attr:`state` is ``IN_FLIGHT`` further invocations are dropped.
    """

    id = EXCEL_REPORTING_ACTION
    type = ""

    def __init__(
        self,
        *,
        report_client: ReportClient,
        notifier: Notifier,
        ui_settings: UiSettings,
        blob_saver: BlobSaver,
        clock: Clock | None = None,
        export_formats: Iterable[str] = ("csv",),
        enabled: bool = True,
        detect_timezone: Callable[[], str] = detect_timezone,
    ) -> None:
        self._report_client = report_client
        self._notifier = notifier
        self._ui_settings = ui_settings
        self._blob_saver = blob_saver
        self._clock = clock or SystemClock()
        self._export_formats = frozenset(export_formats)
        self._can_download_excel = enabled
        self._detect_timezone = detect_timezone
        self._state = RequestState.IDLE
        self.last_error: BaseError | None = None

    @classmethod
    def from_core(cls, core: "CoreSetup") -> "ExcelReportPanelAction":
        return cls(
            report_client=ReportClient(core.http, core.settings.generate_endpoint),
            notifier=core.notifier,
            ui_settings=core.ui_settings,
            blob_saver=core.blob_saver,
            clock=core.clock,
            export_formats=core.settings.export_formats,
            enabled=core.settings.enabled,
        )

    @property
    def state(self) -> RequestState:
        return self._state

    def get_icon_type(self) -> str:
        return "document"

    def get_display_name(self) -> str:
        return "Download as Excel"

    async def is_compatible(self, context: ActionContext) -> bool:
        if not self._can_download_excel:
            return False
        embeddable = context.embeddable
        return (
            embeddable.get_input().view_mode != ViewMode.EDIT
            and embeddable.type == SEARCH_EMBEDDABLE_TYPE
        )

    async def execute(self, context: ActionContext) -> None:
        embeddable = context.embeddable
        if not is_saved_search_embeddable(embeddable):
            raise IncompatibleActionError(
                action_id=self.id, embeddable_type=getattr(embeddable, "type", None)
            )

        if self._state is RequestState.IN_FLIGHT:
            logger.debug("export.dropped", reason="in_flight")
            return

        self.last_error = None
        saved_search = embeddable.get_saved_search()
        with structlog.contextvars.bound_contextvars(action_id=self.id, saved_search_id=saved_search.id):
            await self._export(embeddable, saved_search)

    async def _export(self, embeddable: SavedSearchPanel, saved_search: SavedSearch) -> None:
        timezone = resolve_timezone(
            self._ui_settings.get(DATE_FORMAT_TZ), detect=self._detect_timezone
        )
        try:
            window = resolve_time_window(
                embeddable.get_input().time_range,
                timezone=timezone,
                clock=self._clock,
                week_start=week_start_from_setting(self._ui_settings.get(DATE_FORMAT_DOW)),
            )
        except InvalidTimeRangeError as exc:
            self._on_generation_fail(exc, saved_search.id)
            return

        body = build_request_body(window, pick_state(get_search_request_body(embeddable)))

        self._state = RequestState.IN_FLIGHT
        self._notifier.add_success(STARTED_TOAST)
        logger.info("export.started", timerange=body["timerange"])

        try:
            raw_response = await self._report_client.generate(saved_search.id, body)
            await self._save(saved_search.title or saved_search.id, raw_response)
        except Exception as exc:
            self._on_generation_fail(exc, saved_search.id)
            return
        finally:
            self._state = RequestState.IDLE

        logger.info("export.completed", size=len(raw_response))

    async def _save(self, title: str, raw_response: str) -> None:
        location = await self._blob_saver.save_blob(
            Blob.from_text(raw_response, CSV_CONTENT_TYPE), f"{title}.csv"
        )
        logger.info("export.saved", location=location, format="csv")
        if "xlsx" in self._export_formats:
            workbook = Blob(csv_to_workbook(raw_response, sheet_name=title), XLSX_CONTENT_TYPE)
            location = await self._blob_saver.save_blob(workbook, f"{title}.xlsx")
            logger.info("export.saved", location=location, format="xlsx")

    def _on_generation_fail(self, error: BaseException, saved_search_id: str) -> None:
        self._state = RequestState.IDLE
        if isinstance(error, BaseError):
            self.last_error = error
        else:
            self.last_error = ReportGenerationError(
                str(error) or type(error).__name__, saved_search_id=saved_search_id, cause=error
            )
        logger.error("export.failed", **self.last_error.log_fields())
        self._notifier.add_danger(FAILED_TOAST)
