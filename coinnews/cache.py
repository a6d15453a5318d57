"""
In-memory cache for fetched article batches.

Entries are keyed by query (topic + limit) and stamped with the time of the
successful fetch that produced them. Freshness is decided on read against
``ttl_seconds``; expired entries are kept so they can be served as a fallback
when a refresh fails. Nothing is evicted except by ``clear()``.
"""
from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Dict, List, Optional

from coinnews.models import Article, CacheEntry

logger = logging.getLogger(__name__)


class NewsCache:
    def __init__(self, ttl_seconds: int = 300, clock: Optional[Callable[[], float]] = None) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock or time.time
        self._lock = threading.Lock()
        self._entries: Dict[str, CacheEntry] = {}

    def now(self) -> float:
        return self._clock()

    def is_fresh(self, entry: CacheEntry) -> bool:
        return self.now() - entry.fetched_at < self.ttl_seconds

    def get(self, key: str) -> Optional[CacheEntry]:
        """Return the entry for ``key`` regardless of its age."""
        with self._lock:
            return self._entries.get(key)

    def get_fresh(self, key: str) -> Optional[CacheEntry]:
        entry = self.get(key)
        if entry and self.is_fresh(entry):
            return entry
        return None

    def set(self, key: str, articles: List[Article]) -> CacheEntry:
        entry = CacheEntry(key=key, articles=list(articles), fetched_at=self.now())
        with self._lock:
            self._entries[key] = entry
        logger.debug("Cached %d articles under %s", len(entry.articles), key)
        return entry

    def clear(self) -> None:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        logger.debug("Cleared %d cache entries", count)

    def snapshot(self) -> Dict[str, object]:
        """Return a lightweight view for status endpoints without exposing payload content."""
        now = self.now()
        with self._lock:
            entries = list(self._entries.values())
        return {
            "ttl_seconds": self.ttl_seconds,
            "entries": [
                {
                    "key": entry.key,
                    "age_seconds": round(now - entry.fetched_at, 2),
                    "articles": len(entry.articles),
                    "fresh": now - entry.fetched_at < self.ttl_seconds,
                }
                for entry in entries
            ],
        }

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries
