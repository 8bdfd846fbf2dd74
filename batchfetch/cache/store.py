import threading
from typing import List

class ResultCache:
    """
    Unordered bag of successfully fetched response bodies.

    Safe to share between asyncio tasks and OS threads: every mutation
    happens under a single lock.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._items: List[str] = []

    def add(self, body: str):
        """Append one body to the cache"""
        with self._lock:
            self._items.append(body)

    def merge(self, other: "ResultCache"):
        """Append every body held by another cache"""
        bodies = other.snapshot()
        with self._lock:
            self._items.extend(bodies)

    def size(self) -> int:
        with self._lock:
            return len(self._items)

    def __len__(self) -> int:
        return self.size()

    def snapshot(self) -> List[str]:
        """Copy of the cached bodies, in no particular order"""
        with self._lock:
            return list(self._items)

    def clear(self):
        """Drop all cached bodies (for tests and the API)"""
        with self._lock:
            self._items.clear()

    def stats(self) -> dict:
        """Get cache statistics"""
        with self._lock:
            return {
                "size": len(self._items),
                "total_bytes": sum(len(item.encode("utf-8")) for item in self._items),
            }

# Process-wide instance used by the CLI and the API
cache = ResultCache()
