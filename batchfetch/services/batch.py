import asyncio
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence
import httpx

from batchfetch.core.config import settings
from batchfetch.cache import store as cache_store
from batchfetch.cache.store import ResultCache
from batchfetch.fetch.base import BaseFetcher, FetchOutcome
from batchfetch.fetch.client import build_client, fetch_and_store
from batchfetch.fetch.requests_fetcher import RequestsFetcher, fetch_and_store_sync
from batchfetch.fetch.utils import build_targets, utc_now_iso
from batchfetch.schemas import BatchReport

BACKENDS = ("async", "threads")

async def run_batch(
    count: int,
    *,
    client: Optional[httpx.AsyncClient] = None,
    cache: Optional[ResultCache] = None,
    url_template: Optional[str] = None
) -> BatchReport:
    """
    Fetch `count` targets concurrently on the event loop and wait for all of them.

    1. Build the target URLs (indices 0..count-1)
    2. Start one fetch per target, no concurrency limit
    3. Join on every fetch regardless of outcome
    4. Report the cache size

    A client passed in by the caller is left open; one built here is closed
    after the join. count == 0 never builds a client.
    """
    cache = cache if cache is not None else cache_store.cache
    urls = build_targets(count, url_template or settings.URL_TEMPLATE)

    started_at = utc_now_iso()
    t0 = time.monotonic()
    print("Downloads started")

    outcomes: List[FetchOutcome] = []
    if urls:
        own_client = client is None
        if own_client:
            client = build_client()
        try:
            # fetch_and_store never raises, so gather cannot fail fast
            outcomes = await asyncio.gather(*(fetch_and_store(client, cache, url) for url in urls))
        finally:
            if own_client:
                await client.aclose()

    return _finish(urls, outcomes, cache, "async", started_at, t0)

def run_batch_threaded(
    count: int,
    *,
    fetcher: Optional[BaseFetcher] = None,
    cache: Optional[ResultCache] = None,
    url_template: Optional[str] = None
) -> BatchReport:
    """Same contract as run_batch, with one OS thread per target and a blocking fetcher."""
    cache = cache if cache is not None else cache_store.cache
    urls = build_targets(count, url_template or settings.URL_TEMPLATE)

    started_at = utc_now_iso()
    t0 = time.monotonic()
    print("Downloads started")

    outcomes: List[FetchOutcome] = []
    if urls:
        own_fetcher = fetcher is None
        if own_fetcher:
            fetcher = RequestsFetcher()
        try:
            with ThreadPoolExecutor(max_workers=len(urls), thread_name_prefix="fetch") as pool:
                futures = [pool.submit(fetch_and_store_sync, fetcher, cache, url) for url in urls]
                outcomes = [future.result() for future in futures]
        finally:
            if own_fetcher:
                fetcher.close()

    return _finish(urls, outcomes, cache, "threads", started_at, t0)

def run(count: Optional[int] = None, backend: Optional[str] = None) -> BatchReport:
    """Blocking entry point used by the CLI. Defaults come from settings."""
    count = settings.BATCH_SIZE if count is None else count
    backend = (backend or settings.FETCH_BACKEND).lower()

    if backend == "async":
        return asyncio.run(run_batch(count))
    if backend == "threads":
        return run_batch_threaded(count)
    raise ValueError(f"Unknown fetch backend {backend!r}, expected one of {BACKENDS}")

def _finish(
    urls: Sequence[str],
    outcomes: Sequence[FetchOutcome],
    cache: ResultCache,
    backend: str,
    started_at: str,
    t0: float
) -> BatchReport:
    cache_size = len(cache)
    print(f"All downloads finished. Cache size: {cache_size}")

    failed_urls = [o.url for o in outcomes if not o.ok]
    return BatchReport(
        requested=len(urls),
        succeeded=len(outcomes) - len(failed_urls),
        failed=len(failed_urls),
        cache_size=cache_size,
        failed_urls=failed_urls,
        backend=backend,
        started_at=started_at,
        finished_at=utc_now_iso(),
        elapsed_seconds=round(time.monotonic() - t0, 3),
    )
