"""Application export – ReportClient for the immediate-generate endpoint."""
from __future__ import annotations

import json
from typing import Any

from search_export.adapters.http import HttpClient
from search_export.config.export_settings import DEFAULT_GENERATE_ENDPOINT
from search_export.observability.logging import get_logger

__all__ = ["ReportClient"]

logger = get_logger(__name__)


class ReportClient:
    """Asks the reporting backend to generate a CSV for a saved search right now."""

    def __init__(self, http: HttpClient, generate_endpoint: str = DEFAULT_GENERATE_ENDPOINT) -> None:
        self._http = http
        self._endpoint = generate_endpoint.rstrip("/")

    def report_url(self, saved_search_id: str) -> str:
        return f"{self._endpoint}/search:{saved_search_id}"

    async def generate(self, saved_search_id: str, body: dict[str, Any]) -> str:
        """POST *body* and return the raw report text."""
        url = self.report_url(saved_search_id)
        logger.info("report.requested", url=url, timerange=body.get("timerange"))
        response = await self._http.post(
            url,
            content=json.dumps(body),
            headers={"Content-Type": "application/json"},
        )
        text = response.text
        logger.info("report.received", url=url, size=len(text))
        return text
