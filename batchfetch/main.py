import sys
from fastapi import FastAPI
from contextlib import asynccontextmanager
from batchfetch.api.routes import router
from batchfetch.core.config import settings
from batchfetch.services import batch

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    The result cache holds no external resources, so there is nothing to tear down.
    """
    print("Starting Batch Fetcher...")
    if settings.USE_MOCK:
        print("Mock mode enabled, no network requests will be made")

    yield

    print("Shutting down Batch Fetcher...")

app = FastAPI(
    title="Batch Fetcher",
    description="Concurrent fetch-and-collect batch runner",
    version="1.0.0",
    lifespan=lifespan
)

app.include_router(router)

@app.get("/")
async def root():
    """Root endpoint with basic info"""
    return {
        "service": "Batch Fetcher",
        "version": "1.0.0",
        "endpoints": {
            "batch": "POST /batch",
            "health": "GET /health",
            "cache_stats": "GET /cache/stats",
            "clear_cache": "DELETE /cache"
        }
    }

def cli():
    """
    Console entry point: run one batch with the configured size.
    Exits 0 however many fetches fail; an invalid BATCH_SIZE or FETCH_BACKEND
    prints one line to stderr and exits 2.
    """
    try:
        batch.run()
    except ValueError as e:
        print(f"batchfetch: invalid configuration: {e}", file=sys.stderr)
        sys.exit(2)

if __name__ == "__main__":
    cli()
