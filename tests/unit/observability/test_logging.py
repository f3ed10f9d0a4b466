"""Unit tests for observability logging."""

from __future__ import annotations

import io
import json
import logging

import pytest
import structlog

from search_export.observability.logging import (
    DEFAULT_SENSITIVE_FIELDS,
    REDACTED,
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
)


class TestSensitiveFieldsFilter:
    def test_default_fields(self) -> None:
        assert "authorization" in DEFAULT_SENSITIVE_FIELDS

    def test_redact_top_level(self) -> None:
        result = SensitiveFieldsFilter().redact({"Authorization": "ApiKey x", "url": "/api"})
        assert result == {"Authorization": REDACTED, "url": "/api"}

    def test_header_style_keys(self) -> None:
        result = SensitiveFieldsFilter().redact({"Proxy-Authorization": "a", "x-api-key": "b", "kbn-xsrf": "true"})
        assert result == {"Proxy-Authorization": REDACTED, "x-api-key": REDACTED, "kbn-xsrf": "true"}

    def test_nested_dicts_and_lists(self) -> None:
        result = SensitiveFieldsFilter().redact(
            {"headers": {"cookie": "sid=1", "accept": "*/*"}, "hops": [{"token": "t", "host": "a"}]}
        )
        assert result == {
            "headers": {"cookie": REDACTED, "accept": "*/*"},
            "hops": [{"token": REDACTED, "host": "a"}],
        }

    def test_custom_fields(self) -> None:
        result = SensitiveFieldsFilter(frozenset({"Title"})).redact({"title": "secret", "token": "t"})
        assert result == {"title": REDACTED, "token": "t"}

    def test_is_a_structlog_processor(self) -> None:
        event = SensitiveFieldsFilter()(None, "info", {"event": "x", "password": "p"})
        assert event == {"event": "x", "password": REDACTED}


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    root.handlers[:] = handlers
    root.setLevel(level)


def _last_record(stream: io.StringIO) -> dict:
    return json.loads(stream.getvalue().strip().splitlines()[-1])


class TestJsonLoggerFactory:
    def test_renders_json_lines(self, restore_logging) -> None:
        stream = io.StringIO()
        JsonLoggerFactory.configure(level=logging.INFO, stream=stream)

        get_logger("search_export.test").info("export.started", saved_search_id="abc")

        record = _last_record(stream)
        assert record["event"] == "export.started"
        assert record["saved_search_id"] == "abc"
        assert record["level"] == "info"
        assert record["logger"] == "search_export.test"
        assert "timestamp" in record

    def test_redacts_sensitive_values(self, restore_logging) -> None:
        stream = io.StringIO()
        JsonLoggerFactory.configure(stream=stream)

        get_logger("search_export.test").info("http.request", authorization="ApiKey abc")

        assert _last_record(stream)["authorization"] == REDACTED

    def test_context_vars_are_merged_and_redacted(self, restore_logging) -> None:
        stream = io.StringIO()
        JsonLoggerFactory.configure(stream=stream)

        with structlog.contextvars.bound_contextvars(saved_search_id="abc", api_key="k"):
            get_logger("search_export.test").info("report.requested")

        record = _last_record(stream)
        assert record["saved_search_id"] == "abc"
        assert record["api_key"] == REDACTED

    def test_stdlib_records_are_rendered(self, restore_logging) -> None:
        stream = io.StringIO()
        JsonLoggerFactory.configure(stream=stream)

        logging.getLogger("httpx").warning("plain %s", "message")

        record = _last_record(stream)
        assert record["event"] == "plain message"
        assert record["logger"] == "httpx"

    def test_level_filters(self, restore_logging) -> None:
        stream = io.StringIO()
        JsonLoggerFactory.configure(level=logging.WARNING, stream=stream)

        get_logger("search_export.test").info("quiet")

        assert stream.getvalue() == ""

    def test_console_renderer(self, restore_logging) -> None:
        stream = io.StringIO()
        JsonLoggerFactory.configure(stream=stream, renderer="console")

        get_logger("search_export.test").info("export.completed", size=12)

        line = stream.getvalue()
        assert "export.completed" in line
        assert "size=12" in line

    def test_unknown_renderer(self) -> None:
        with pytest.raises(ValueError, match="unknown renderer"):
            JsonLoggerFactory.configure(renderer="xml")


def test_get_logger_binds_initial_values() -> None:
    logger = get_logger("search_export.test", saved_search_id="abc")
    assert hasattr(logger, "info")
