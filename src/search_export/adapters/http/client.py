"""HTTP adapter – HttpClient port and HttpxHttpClient."""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import httpx

from search_export.kernel.errors import ExternalServiceError, InfrastructureTimeoutError
from search_export.observability.logging import get_logger

logger = get_logger(__name__)

# The dashboard rejects state-changing API calls that lack this header.
XSRF_HEADER = "kbn-xsrf"


@runtime_checkable
class HttpClient(Protocol):
    """Port: the subset of the host HTTP service the export action uses."""

    async def post(self, url: str, **kwargs: Any) -> httpx.Response: ...


class HttpxHttpClient:
    """Async httpx client for the dashboard API.

    Sends the XSRF header on every request and translates httpx failures into
    :class:`ExternalServiceError` / :class:`InfrastructureTimeoutError`.
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 120.0,
        headers: dict[str, str] | None = None,
        *,
        service: str = "dashboard",
        **kwargs: Any,
    ) -> None:
        self._service = service
        self._timeout = timeout
        default_headers = {XSRF_HEADER: "true"}
        default_headers.update(headers or {})
        self._client = httpx.AsyncClient(
            base_url=base_url, timeout=timeout, headers=default_headers, **kwargs
        )

    async def __aenter__(self) -> "HttpxHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("POST", url, **kwargs)

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise InfrastructureTimeoutError(
                f"{method} {url} timed out after {self._timeout:g}s",
                timeout_seconds=self._timeout,
                cause=exc,
            ) from exc
        except httpx.HTTPStatusError as exc:
            raise ExternalServiceError(
                self._service,
                status_code=exc.response.status_code,
                url=str(exc.request.url),
                detail={"body": exc.response.text[:500]},
                cause=exc,
            ) from exc
        except httpx.HTTPError as exc:
            raise ExternalServiceError(
                self._service,
                f"{self._service} request failed: {str(exc) or type(exc).__name__}",
                url=url,
                cause=exc,
            ) from exc
        logger.debug("http.response", method=method, url=url, status_code=response.status_code)
        return response


__all__ = ["HttpClient", "HttpxHttpClient", "XSRF_HEADER"]
