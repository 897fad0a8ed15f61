"""Fixed-window request limiter backed by an injected store.

The limiter owns no global state: callers create a store and a limiter and pass
them where needed (the web app keeps one pair on app.state).
"""
import time
from typing import Callable, Dict, Iterator, Optional, Tuple

from bulkbasket.utilities.config import RATE_LIMIT_MAX_REQUESTS, RATE_LIMIT_WINDOW_SECONDS


class RateLimitEntry:
    def __init__(self, count: int, reset_at: float):
        self.count = count
        self.reset_at = reset_at

    def __repr__(self) -> str:
        return f"RateLimitEntry(count={self.count}, reset_at={self.reset_at})"


class InMemoryRateLimitStore:
    """Dict-backed store; swap for a shared store when running several workers."""

    def __init__(self):
        self._entries: Dict[str, RateLimitEntry] = {}

    def get(self, key: str) -> Optional[RateLimitEntry]:
        return self._entries.get(key)

    def set(self, key: str, entry: RateLimitEntry):
        self._entries[key] = entry

    def delete(self, key: str):
        self._entries.pop(key, None)

    def items(self) -> Iterator[Tuple[str, RateLimitEntry]]:
        return iter(list(self._entries.items()))

    def __len__(self) -> int:
        return len(self._entries)


class RateLimiter:
    def __init__(self, store: InMemoryRateLimitStore, max_requests: int = RATE_LIMIT_MAX_REQUESTS,
                 window_seconds: float = RATE_LIMIT_WINDOW_SECONDS,
                 clock: Callable[[], float] = time.time):
        self.store = store
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._next_cleanup = clock() + window_seconds

    def _active_entry(self, key: str) -> Optional[RateLimitEntry]:
        entry = self.store.get(key)
        if entry is None or self._clock() > entry.reset_at:
            return None
        return entry

    def is_allowed(self, key: str) -> bool:
        '''Records a request for key and reports whether it fits in the current window.'''
        self._maybe_cleanup()
        entry = self._active_entry(key)
        if entry is None:
            self.store.set(key, RateLimitEntry(1, self._clock() + self.window_seconds))
            return True
        if entry.count >= self.max_requests:
            return False
        entry.count += 1
        self.store.set(key, entry)
        return True

    def remaining_requests(self, key: str) -> int:
        entry = self._active_entry(key)
        if entry is None:
            return self.max_requests
        return max(0, self.max_requests - entry.count)

    def reset_time(self, key: str) -> float:
        '''Epoch seconds at which the key's window ends.'''
        entry = self._active_entry(key)
        if entry is None:
            return self._clock() + self.window_seconds
        return entry.reset_at

    def _maybe_cleanup(self):
        # at most one sweep per window
        now = self._clock()
        if now >= self._next_cleanup:
            self.cleanup()
            self._next_cleanup = now + self.window_seconds

    def cleanup(self) -> int:
        '''Drops expired entries and returns how many were removed.'''
        now = self._clock()
        expired = [key for key, entry in self.store.items() if now > entry.reset_at]
        for key in expired:
            self.store.delete(key)
        return len(expired)


__all__ = ['RateLimitEntry', 'InMemoryRateLimitStore', 'RateLimiter']
