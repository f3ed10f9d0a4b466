"""Plugin – wires the export action into the host's trigger registry."""
from __future__ import annotations

from dataclasses import dataclass, field

from search_export.adapters.http import HttpClient, HttpxHttpClient
from search_export.application.actions import (
    CONTEXT_MENU_TRIGGER,
    ExcelReportPanelAction,
    UiActions,
)
from search_export.application.downloads import BlobSaver, select_blob_saver
from search_export.application.notifications import LoggingNotifier, Notifier
from search_export.application.ui_settings import (
    DATE_FORMAT_DOW,
    DATE_FORMAT_TZ,
    InMemoryUiSettings,
    UiSettings,
)
from search_export.config import ExportSettings
from search_export.kernel.time import Clock, SystemClock
from search_export.observability.logging import get_logger

__all__ = [
    "CoreSetup",
    "SavedSearchExcelExportPlugin",
    "SetupDependencies",
    "StartDependencies",
    "build_core",
]

logger = get_logger(__name__)


@dataclass
class CoreSetup:
    """Host services handed to the plugin at setup time."""

    http: HttpClient
    notifier: Notifier
    ui_settings: UiSettings
    blob_saver: BlobSaver
    settings: ExportSettings = field(default_factory=ExportSettings)
    clock: Clock = field(default_factory=SystemClock)


@dataclass
class SetupDependencies:
    ui_actions: UiActions


@dataclass
class StartDependencies:
    ui_actions: UiActions


def build_core(
    settings: ExportSettings,
    *,
    http: HttpClient | None = None,
    notifier: Notifier | None = None,
    ui_settings: UiSettings | None = None,
    blob_saver: BlobSaver | None = None,
    clock: Clock | None = None,
) -> CoreSetup:
    """Production wiring; any service can be swapped out by passing it in."""
    return CoreSetup(
        http=http or HttpxHttpClient(base_url=settings.base_url, timeout=settings.timeout_seconds),
        notifier=notifier or LoggingNotifier(),
        ui_settings=ui_settings
        or InMemoryUiSettings(
            {DATE_FORMAT_TZ: settings.date_format_tz, DATE_FORMAT_DOW: settings.date_format_dow}
        ),
        blob_saver=blob_saver or select_blob_saver(settings),
        settings=settings,
        clock=clock or SystemClock(),
    )


class SavedSearchExcelExportPlugin:
    """Registers "Download as Excel" on the panel context menu."""

    def setup(self, core: CoreSetup, deps: SetupDependencies) -> ExcelReportPanelAction:
        action = ExcelReportPanelAction.from_core(core)
        deps.ui_actions.register_action(action)
        deps.ui_actions.attach_action(CONTEXT_MENU_TRIGGER, action.id)
        deps.ui_actions.add_trigger_action(CONTEXT_MENU_TRIGGER, action)
        logger.info("plugin.setup", action_id=action.id, trigger_id=CONTEXT_MENU_TRIGGER)
        return action

    def start(self, core: CoreSetup, deps: StartDependencies) -> None:
        pass

    def stop(self) -> None:
        pass
