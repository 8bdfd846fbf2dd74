import asyncio
import json
import sys
from datetime import datetime, timezone
from typing import Tuple
import httpx
import requests

def utc_now_iso() -> str:
    """Current UTC time as an ISO 8601 string"""
    return datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")

def build_targets(count: int, url_template: str) -> Tuple[str, ...]:
    """
    Map indices 0..count-1 onto request URLs.
    Example: build_targets(2, "https://example.com/data/{index}")
        -> ("https://example.com/data/0", "https://example.com/data/1")
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    return tuple(url_template.format(index=i) for i in range(count))

def describe_error(exc: BaseException, url: str) -> str:
    """
    Collapse a transport failure (httpx or requests) into a short human-readable reason.
    """
    if isinstance(exc, (httpx.TimeoutException, requests.Timeout, asyncio.TimeoutError, TimeoutError)):
        return f"Timeout while fetching {url}"
    if isinstance(exc, httpx.HTTPStatusError):
        return f"HTTP error {exc.response.status_code}"
    if isinstance(exc, requests.HTTPError) and exc.response is not None:
        return f"HTTP error {exc.response.status_code}"
    message = str(exc).strip()
    return message or type(exc).__name__

def report_failure(url: str, reason: str):
    print(f"Error downloading {url}: {reason}", file=sys.stderr)

def mock_body(url: str) -> str:
    """Canned response body for mock mode"""
    return json.dumps({"source": url, "data": "mock payload"})

def _mock_handler(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, text=mock_body(str(request.url)))

def mock_transport() -> httpx.MockTransport:
    """Transport answering every request with 200 and a canned body, no network involved"""
    return httpx.MockTransport(_mock_handler)
