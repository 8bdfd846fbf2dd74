import asyncio
import httpx
from typing import Optional
from batchfetch.core.config import settings
from batchfetch.cache.store import ResultCache
from batchfetch.fetch.base import FetchOutcome
from batchfetch.fetch.utils import describe_error, report_failure, utc_now_iso, mock_transport

def build_client(
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> httpx.AsyncClient:
    """
    Build the shared async client for one batch.
    In mock mode every request is answered in-process.
    """
    if transport is None and settings.USE_MOCK:
        transport = mock_transport()

    headers = {
        "User-Agent": settings.USER_AGENT,
        "Accept": "*/*",
    }

    return httpx.AsyncClient(
        timeout=timeout if timeout is not None else settings.REQUEST_TIMEOUT,
        headers=headers,
        follow_redirects=True,
        # every target of a batch is in flight at once
        limits=httpx.Limits(max_connections=None, max_keepalive_connections=20),
        transport=transport
    )

def request_deadline(client: httpx.AsyncClient) -> float:
    """
    Overall budget for one request, taken from the client's configured timeout.
    httpx applies its timeout to each connect/read/write/pool phase, not the whole request.
    """
    configured = client.timeout.read
    return configured if configured is not None else settings.REQUEST_TIMEOUT

async def fetch_and_store(
    client: httpx.AsyncClient,
    cache: ResultCache,
    url: str,
    deadline: Optional[float] = None
) -> FetchOutcome:
    """
    Fetch a single URL once and put the body into the cache on success.

    The whole request, body included, must finish within `deadline` seconds
    (the client's timeout by default).

    Never raises: timeouts, connection errors, non-2xx statuses and read
    failures are reported on stderr and returned as a failed outcome.
    """
    if deadline is None:
        deadline = request_deadline(client)

    try:
        response = await asyncio.wait_for(client.get(url), deadline)
        response.raise_for_status()
        body = response.text
    except Exception as e:
        reason = describe_error(e, url)
        report_failure(url, reason)
        return FetchOutcome(url=url, body=None, error=reason, fetched_at=utc_now_iso())

    cache.add(body)
    return FetchOutcome(url=url, body=body, error=None, fetched_at=utc_now_iso())
