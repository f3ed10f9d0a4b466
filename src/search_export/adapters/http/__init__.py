"""HTTP adapter – async HTTP client wrapper for the reporting API."""
from search_export.adapters.http.client import XSRF_HEADER, HttpClient, HttpxHttpClient

__all__ = ["HttpClient", "HttpxHttpClient", "XSRF_HEADER"]
