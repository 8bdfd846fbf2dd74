from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class FetchOutcome:
    url: str
    body: Optional[str]
    error: Optional[str]
    fetched_at: str  # ISO 8601

    @property
    def ok(self) -> bool:
        return self.error is None

class BaseFetcher:
    def fetch(self, url: str) -> str:
        """Return the response body of a successful GET, raise on any failure."""
        raise NotImplementedError
