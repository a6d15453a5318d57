"""
Core data structures shared by the news service.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, FrozenSet, List, Optional


@dataclass(frozen=True)
class Article:
    """
    Normalized representation of a news article, independent of the upstream schema.
    """

    id: str
    title: str
    url: str
    source: str
    body_snippet: Optional[str] = None
    published_at: Optional[datetime] = None
    image_url: Optional[str] = None
    categories: FrozenSet[str] = field(default_factory=frozenset)
    tags: FrozenSet[str] = field(default_factory=frozenset)

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "title": self.title,
            "body": self.body_snippet,
            "source": self.source,
            "publishedAt": self.published_at.isoformat() if self.published_at else None,
            "url": self.url,
            "imageUrl": self.image_url,
            "categories": sorted(self.categories),
            "tags": sorted(self.tags),
        }


@dataclass
class CacheEntry:
    key: str
    articles: List[Article]
    fetched_at: float


class FetchStatus(str, Enum):
    FRESH = "fresh"
    STALE = "stale"
    FAILED = "failed"


@dataclass
class FetchResult:
    """
    Outcome of resolving one query against the cache and the remote source.

    FRESH results come from within the freshness window (cache hit or a completed
    remote fetch), STALE results are expired entries served after a failed refresh,
    FAILED results carry the error and no articles.
    """

    status: FetchStatus
    key: str
    articles: List[Article] = field(default_factory=list)
    fetched_at: Optional[float] = None
    error: Optional[Exception] = None
    from_cache: bool = False

    @property
    def ok(self) -> bool:
        return self.status is not FetchStatus.FAILED

    def unwrap(self) -> List[Article]:
        if self.status is FetchStatus.FAILED:
            raise self.error or RuntimeError(f"News fetch failed for {self.key}")
        return self.articles


@dataclass
class HealthStatus:
    name: str
    healthy: bool
    last_error: Optional[str] = None
    last_success: Optional[datetime] = None
    items_last_fetch: int = 0
    latency_ms: Optional[float] = None
