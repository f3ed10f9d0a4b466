"""Unit tests – search-export command line."""
from __future__ import annotations

import asyncio
import json
from pathlib import Path

import httpx
import pytest
import respx

from search_export import cli
from search_export.application.embeddables import TimeRange
from search_export.config import ConfigError, ExportSettings
from search_export.config.export_settings import DEFAULT_GENERATE_ENDPOINT
from search_export.kernel.errors import ExternalServiceError
from search_export.plugin import CoreSetup
from search_export.testing.fixtures import SEARCH_BODY

REPORT_URL = f"http://localhost:5601{DEFAULT_GENERATE_ENDPOINT}/search:abc"


@pytest.fixture(autouse=True)
def _no_logging_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli.JsonLoggerFactory, "configure", staticmethod(lambda **kwargs: None))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("BASE_URL", "TIMEOUT_SECONDS", "EXPORT_FORMATS", "DOWNLOAD_DIR", "ENABLED"):
        monkeypatch.delenv(f"SEARCH_EXPORT_{name}", raising=False)


class TestLoadSettings:
    def test_defaults(self) -> None:
        settings = cli.load_settings(cli.build_parser().parse_args(["abc"]))
        assert settings.export_formats == ["csv"]
        assert settings.base_url == "http://localhost:5601"

    def test_flags_override_environment(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("SEARCH_EXPORT_BASE_URL", "http://env:5601")
        monkeypatch.setenv("SEARCH_EXPORT_TIMEOUT_SECONDS", "30")
        args = cli.build_parser().parse_args(
            ["abc", "--base-url", "http://flag:5601", "--output-dir", str(tmp_path), "--format", "xlsx"]
        )

        settings = cli.load_settings(args)

        assert settings.base_url == "http://flag:5601"
        assert settings.timeout_seconds == 30.0
        assert settings.download_dir == str(tmp_path)
        assert settings.export_formats == ["csv", "xlsx"]

    def test_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("SEARCH_EXPORT_BASE_URL=http://dotenv:5601\n")
        args = cli.build_parser().parse_args(["abc", "--env-file", str(env_file)])
        assert cli.load_settings(args).base_url == "http://dotenv:5601"

    def test_bad_environment_value_is_an_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SEARCH_EXPORT_TIMEOUT_SECONDS", "soon")
        with pytest.raises(ConfigError):
            cli.load_settings(cli.build_parser().parse_args(["abc"]))


class TestRunExport:
    def test_success(self, fake_core: CoreSetup) -> None:
        code = asyncio.run(
            cli.run_export(
                fake_core.settings,
                saved_search_id="abc",
                time_range=TimeRange("now-1h", "now"),
                title="Errors",
                search_body=SEARCH_BODY,
                core=fake_core,
            )
        )

        assert code == 0
        assert fake_core.blob_saver.filenames == ["Errors.csv"]
        assert fake_core.http.last.json()["state"]["query"] == SEARCH_BODY["query"]

    def test_failure_returns_1(self, fake_core: CoreSetup) -> None:
        fake_core.http.error = ExternalServiceError("kibana", "refused")
        code = asyncio.run(
            cli.run_export(
                fake_core.settings,
                saved_search_id="abc",
                time_range=TimeRange("now-1h", "now"),
                core=fake_core,
            )
        )
        assert code == 1
        assert fake_core.notifier.dangers

    def test_out_of_range_bound_returns_1(self, fake_core: CoreSetup) -> None:
        code = asyncio.run(
            cli.run_export(
                fake_core.settings,
                saved_search_id="abc",
                time_range=TimeRange("now-10000y", "now"),
                core=fake_core,
            )
        )
        assert code == 1
        assert fake_core.http.call_count == 0
        assert fake_core.notifier.dangers

    def test_disabled_returns_1_without_request(self, fake_core: CoreSetup) -> None:
        fake_core.settings = ExportSettings(blob_saver="memory", enabled=False)
        code = asyncio.run(
            cli.run_export(
                fake_core.settings,
                saved_search_id="abc",
                time_range=TimeRange("now-1h", "now"),
                core=fake_core,
            )
        )
        assert code == 1
        assert fake_core.http.call_count == 0

    def test_title_defaults_to_id(self, fake_core: CoreSetup) -> None:
        asyncio.run(
            cli.run_export(
                fake_core.settings,
                saved_search_id="abc",
                time_range=TimeRange("now-1h", "now"),
                core=fake_core,
            )
        )
        assert fake_core.blob_saver.filenames == ["abc.csv"]


class TestMain:
    @respx.mock
    def test_downloads_into_output_dir(self, tmp_path: Path) -> None:
        route = respx.post(REPORT_URL).mock(return_value=httpx.Response(200, text="a,b\n1,2\n"))
        body_file = tmp_path / "body.json"
        body_file.write_text(json.dumps(SEARCH_BODY))

        code = cli.main(
            [
                "abc",
                "--title", "Errors",
                "--search-body", str(body_file),
                "--output-dir", str(tmp_path / "out"),
                "--format", "xlsx",
                "--timezone", "UTC",
            ]
        )

        assert code == 0
        assert route.call_count == 1
        sent = json.loads(route.calls.last.request.content)
        assert sent["timerange"]["timezone"] == "UTC"
        assert "size" not in sent["state"]
        assert (tmp_path / "out" / "Errors.csv").read_text() == "a,b\n1,2\n"
        assert (tmp_path / "out" / "Errors.xlsx").exists()

    @respx.mock
    def test_server_error_exits_1(self, tmp_path: Path) -> None:
        respx.post(REPORT_URL).mock(return_value=httpx.Response(500))
        assert cli.main(["abc", "--output-dir", str(tmp_path)]) == 1
        assert list(tmp_path.iterdir()) == []

    def test_invalid_setting_exits_2(self, capsys) -> None:
        assert cli.main(["abc", "--timeout", "0"]) == 2
        assert "search-export:" in capsys.readouterr().err

    def test_invalid_environment_exits_2(self, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
        monkeypatch.setenv("SEARCH_EXPORT_EXPORT_FORMATS", "csv,pdf")
        assert cli.main(["abc"]) == 2
        assert "SEARCH_EXPORT_EXPORT_FORMATS" in capsys.readouterr().err

    def test_missing_env_file_exits_2(self, tmp_path: Path) -> None:
        assert cli.main(["abc", "--env-file", str(tmp_path / "nope.env")]) == 2

    def test_missing_search_body_exits_2(self, tmp_path: Path) -> None:
        assert cli.main(["abc", "--search-body", str(tmp_path / "missing.json")]) == 2

    def test_non_object_search_body_exits_2(self, tmp_path: Path) -> None:
        body_file = tmp_path / "body.json"
        body_file.write_text("[1, 2]")
        assert cli.main(["abc", "--search-body", str(body_file)]) == 2

    def test_version(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--version"])
        assert exc_info.value.code == 0
        assert "search-export" in capsys.readouterr().out
