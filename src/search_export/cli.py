"""Command line – export one saved search without a dashboard.

Example::

    search-export 2b9f6c40-8e4e-11ee-b9d1-0242ac120002 \\
        --title "Failed logins" --from now-24h --to now \\
        --search-body body.json --format xlsx --output-dir ./exports
"""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from search_export import __version__
from search_export.application.actions import (
    CONTEXT_MENU_TRIGGER,
    ActionContext,
    InMemoryUiActions,
)
from search_export.application.embeddables import (
    EmbeddableInput,
    InspectorAdapters,
    RequestAdapter,
    SavedSearch,
    SearchEmbeddable,
    StaticSearchSource,
    TimeRange,
)
from search_export.config import (
    ConfigError,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    ExportSettings,
    SettingsFactory,
    SettingsLoader,
)
from search_export.observability.logging import RENDERERS, JsonLoggerFactory, get_logger
from search_export.plugin import CoreSetup, SavedSearchExcelExportPlugin, SetupDependencies, build_core

__all__ = ["build_parser", "load_settings", "main", "run_export"]

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_EXPORT_FAILED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="search-export",
        description="Generate and download the CSV/Excel export of a saved search.",
    )
    parser.add_argument("saved_search_id", help="id of the saved search to export")
    parser.add_argument("--title", help="file name stem for the download (defaults to the id)")
    parser.add_argument("--from", dest="time_from", default="now-15m", help="range start, date math allowed")
    parser.add_argument("--to", dest="time_to", default="now", help="range end, date math allowed")
    parser.add_argument(
        "--search-body",
        type=Path,
        help="JSON file with the search request body (sort, docvalue_fields, query)",
    )
    parser.add_argument("--output-dir", help="download directory (SEARCH_EXPORT_DOWNLOAD_DIR)")
    parser.add_argument(
        "--format",
        dest="formats",
        action="append",
        choices=sorted({"csv", "xlsx"}),
        default=[],
        help="extra output format; csv is always written",
    )
    parser.add_argument("--timezone", help='IANA zone or "Browser" (SEARCH_EXPORT_DATE_FORMAT_TZ)')
    parser.add_argument("--base-url", help="dashboard URL (SEARCH_EXPORT_BASE_URL)")
    parser.add_argument("--timeout", type=float, help="request timeout in seconds")
    parser.add_argument("--env-file", help="read SEARCH_EXPORT_* variables from this .env file")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument(
        "--log-format",
        default="json",
        choices=RENDERERS,
        help="json lines (default) or human-readable console output",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_settings(args: argparse.Namespace) -> ExportSettings:
    loaders: list[SettingsLoader] = [EnvSettingsLoader()]
    if args.env_file:
        loaders.append(DotenvSettingsLoader(args.env_file))
    overrides: dict[str, Any] = {
        "base_url": args.base_url,
        "download_dir": args.output_dir,
        "date_format_tz": args.timezone,
        "timeout_seconds": args.timeout,
    }
    if args.formats:
        overrides["export_formats"] = sorted({"csv", *args.formats})
    return SettingsFactory.create(ExportSettings, loaders, overrides, strict=True)


def _read_search_body(path: Path | None) -> dict[str, Any]:
    if path is None:
        return {}
    with path.open(encoding="utf-8") as fh:
        body = json.load(fh)
    if not isinstance(body, dict):
        raise ValueError(f"{path}: expected a JSON object")
    return body


async def run_export(
    settings: ExportSettings,
    *,
    saved_search_id: str,
    time_range: TimeRange,
    title: str | None = None,
    search_body: dict[str, Any] | None = None,
    core: CoreSetup | None = None,
) -> int:
    """Register the action on a throwaway registry and invoke it once."""
    owns_core = core is None
    core = core or build_core(settings)
    ui_actions = InMemoryUiActions()
    action = SavedSearchExcelExportPlugin().setup(core, SetupDependencies(ui_actions=ui_actions))

    adapters = InspectorAdapters()
    if search_body:
        adapters.requests.start("search-export", search_body)
    panel = SearchEmbeddable(
        input=EmbeddableInput(time_range=time_range),
        saved_search=SavedSearch(
            id=saved_search_id,
            title=title or saved_search_id,
            search_source=StaticSearchSource(search_body or {}),
        ),
        inspector_adapters=adapters,
    )
    context = ActionContext(embeddable=panel)

    try:
        compatible = await ui_actions.get_trigger_compatible_actions(CONTEXT_MENU_TRIGGER, context)
        if action not in compatible:
            logger.error("cli.action_unavailable", action_id=action.id, enabled=settings.enabled)
            return EXIT_EXPORT_FAILED
        await action.execute(context)
    finally:
        if owns_core and hasattr(core.http, "aclose"):
            await core.http.aclose()

    return EXIT_EXPORT_FAILED if action.last_error is not None else EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    JsonLoggerFactory.configure(level=getattr(logging, args.log_level), renderer=args.log_format)

    try:
        settings = load_settings(args)
        search_body = _read_search_body(args.search_body)
    except ConfigError as exc:
        print(f"search-export: {exc.message}", file=sys.stderr)
        return EXIT_USAGE
    except (OSError, ValueError) as exc:
        print(f"search-export: {exc}", file=sys.stderr)
        return EXIT_USAGE

    return asyncio.run(
        run_export(
            settings,
            saved_search_id=args.saved_search_id,
            time_range=TimeRange(from_=args.time_from, to=args.time_to),
            title=args.title,
            search_body=search_body,
        )
    )


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
