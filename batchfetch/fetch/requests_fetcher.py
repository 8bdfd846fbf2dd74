import time
from typing import Optional
import requests

from batchfetch.core.config import settings
from batchfetch.cache.store import ResultCache
from .base import BaseFetcher, FetchOutcome
from .utils import describe_error, report_failure, utc_now_iso, mock_body

_CHUNK_SIZE = 8192

class RequestsFetcher(BaseFetcher):
    """Blocking fetcher for the threaded runner. One session is shared by all threads."""

    def __init__(self, session: Optional[requests.Session] = None, timeout_sec: Optional[float] = None):
        self.session = session if session is not None else requests.Session()
        self.timeout_sec = timeout_sec if timeout_sec is not None else settings.REQUEST_TIMEOUT
        # sent per request so a caller's session is left as it was
        self.headers = {"User-Agent": settings.USER_AGENT, "Accept": "*/*"}

    def fetch(self, url: str) -> str:
        """
        GET `url` and return its body. The body is streamed and the whole
        request must finish within timeout_sec; requests alone only bounds
        connect and each individual read.
        """
        if settings.USE_MOCK:
            return mock_body(url)

        started = time.monotonic()
        with self.session.get(url, headers=self.headers, timeout=self.timeout_sec, stream=True) as resp:
            resp.raise_for_status()
            # raise_for_status lets 1xx/3xx through
            if not 200 <= resp.status_code < 300:
                raise requests.HTTPError(f"HTTP error {resp.status_code}", response=resp)

            chunks = []
            for chunk in resp.iter_content(chunk_size=_CHUNK_SIZE):
                if time.monotonic() - started > self.timeout_sec:
                    raise requests.Timeout(f"Request to {url} exceeded {self.timeout_sec}s")
                chunks.append(chunk)

            return b"".join(chunks).decode(resp.encoding or "utf-8", errors="replace")

    def close(self):
        self.session.close()

def fetch_and_store_sync(fetcher: BaseFetcher, cache: ResultCache, url: str) -> FetchOutcome:
    """Thread-side counterpart of fetch_and_store: one attempt, never raises."""
    try:
        body = fetcher.fetch(url)
    except Exception as e:
        reason = describe_error(e, url)
        report_failure(url, reason)
        return FetchOutcome(url=url, body=None, error=reason, fetched_at=utc_now_iso())

    cache.add(body)
    return FetchOutcome(url=url, body=body, error=None, fetched_at=utc_now_iso())
