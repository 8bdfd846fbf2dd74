from pydantic import BaseModel, Field
from typing import List

class BatchRequest(BaseModel):
    count: int = Field(default=10, ge=0, description="Number of targets to fetch")

class BatchReport(BaseModel):
    requested: int = Field(ge=0)
    succeeded: int = Field(ge=0)
    failed: int = Field(ge=0)
    cache_size: int = Field(ge=0, description="Entries in the shared cache after the join")
    failed_urls: List[str] = Field(default_factory=list)
    backend: str = Field(default="async", description="async or threads")
    started_at: str = Field(description="ISO 8601, UTC")
    finished_at: str = Field(description="ISO 8601, UTC")
    elapsed_seconds: float = Field(ge=0)

class CacheStats(BaseModel):
    size: int
    total_bytes: int
