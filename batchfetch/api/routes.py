from fastapi import APIRouter, HTTPException, status
from batchfetch.schemas import BatchRequest, BatchReport, CacheStats
from batchfetch.services.batch import run_batch
from batchfetch.cache import store as cache_store
from batchfetch.cache.store import ResultCache

router = APIRouter()

@router.post("/batch", response_model=BatchReport)
async def start_batch(request: BatchRequest):
    """
    Run one batch into its own cache, then fold its bodies into the
    process-wide cache. `cache_size` describes this batch only.

    Individual fetch failures never fail the request; they show up in
    `failed` and `failed_urls`.
    """
    try:
        batch_cache = ResultCache()
        report = await run_batch(request.count, cache=batch_cache)
        cache_store.cache.merge(batch_cache)
        return report
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Batch failed: {e}"
        )

@router.get("/cache/stats", response_model=CacheStats)
async def cache_stats():
    return CacheStats(**cache_store.cache.stats())

@router.delete("/cache")
async def clear_cache():
    """Clear all cached bodies"""
    cache_store.cache.clear()
    return {"message": "Cache cleared"}

@router.get("/health")
async def health_check():
    return {"status": "healthy"}
