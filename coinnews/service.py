"""
Cached, deduplicating news fetcher.

Each query resolves in three steps: serve a fresh cache entry if one exists,
otherwise issue a single remote request and cache the normalized batch, and on
failure fall back to whatever entry exists for the key, however old.
"""
from __future__ import annotations

import logging
import threading
import time
from datetime import datetime, timezone
from typing import Dict, List, Optional

from coinnews.cache import NewsCache
from coinnews.exceptions import TransportError
from coinnews.http_client import HttpClient
from coinnews.models import Article, FetchResult, FetchStatus, HealthStatus
from coinnews.normalizer import transform_batch
from coinnews.settings import NewsSettings

logger = logging.getLogger(__name__)

GENERAL_KEY_PREFIX = "general"


class NewsService:
    name = "cryptocompare"

    def __init__(
        self,
        cache: NewsCache,
        http: Optional[HttpClient] = None,
        settings: Optional[NewsSettings] = None,
    ) -> None:
        self.settings = settings or NewsSettings()
        self.cache = cache
        self.http = http or HttpClient(
            timeout=self.settings.http_timeout,
            max_retries=self.settings.http_max_retries,
            user_agent=self.settings.user_agent,
        )
        self._health = HealthStatus(name=self.name, healthy=True)
        self._health_lock = threading.Lock()

    @staticmethod
    def topic_key(topic: str, limit: int) -> str:
        return f"{topic.upper()}_{limit}"

    @staticmethod
    def general_key(limit: int) -> str:
        return f"{GENERAL_KEY_PREFIX}_{limit}"

    def fetch_topic_news(self, topic: str, limit: Optional[int] = None) -> List[Article]:
        """
        Articles for ``topic`` (e.g. a coin symbol), at most ``limit`` of them.

        Raises TransportError when the source fails and nothing is cached for the query.
        """
        return self.load_topic(topic, limit).unwrap()

    def fetch_general_news(self, limit: Optional[int] = None) -> List[Article]:
        return self.load_general(limit).unwrap()

    def load_topic(self, topic: str, limit: Optional[int] = None) -> FetchResult:
        if not isinstance(topic, str) or not topic.strip():
            raise ValueError("topic must be a non-empty string")
        limit = self._resolve_limit(limit, self.settings.topic_limit)
        symbol = topic.strip().upper()
        params = {
            "categories": symbol,
            "excludeCategories": self.settings.exclude_categories,
        }
        return self._load(self.topic_key(symbol, limit), params, limit)

    def load_general(self, limit: Optional[int] = None) -> FetchResult:
        limit = self._resolve_limit(limit, self.settings.general_limit)
        params = {
            "lang": self.settings.language,
            "excludeCategories": self.settings.exclude_categories,
        }
        return self._load(self.general_key(limit), params, limit)

    def clear_cache(self) -> None:
        self.cache.clear()

    def health(self) -> HealthStatus:
        with self._health_lock:
            return self._health

    def _resolve_limit(self, limit: Optional[int], default: int) -> int:
        if limit is None:
            return default
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise ValueError(f"limit must be a positive integer, got {limit!r}")
        return limit

    def _load(self, key: str, params: Dict[str, str], limit: int) -> FetchResult:
        fresh = self.cache.get_fresh(key)
        if fresh is not None:
            logger.debug("Cache hit for %s", key)
            return FetchResult(
                status=FetchStatus.FRESH,
                key=key,
                articles=fresh.articles,
                fetched_at=fresh.fetched_at,
                from_cache=True,
            )

        cached = self.cache.get(key)

        try:
            articles = self._fetch_remote(params, limit)
        except TransportError as exc:
            if cached is not None:
                logger.warning("Serving stale news for %s after fetch failure: %s", key, exc)
                return FetchResult(
                    status=FetchStatus.STALE,
                    key=key,
                    articles=cached.articles,
                    fetched_at=cached.fetched_at,
                    error=exc,
                    from_cache=True,
                )
            logger.error("Failed to fetch news for %s: %s", key, exc)
            return FetchResult(status=FetchStatus.FAILED, key=key, error=exc)

        entry = self.cache.set(key, articles)
        return FetchResult(
            status=FetchStatus.FRESH,
            key=key,
            articles=entry.articles,
            fetched_at=entry.fetched_at,
        )

    def _fetch_remote(self, params: Dict[str, str], limit: int) -> List[Article]:
        start = time.time()
        try:
            payload = self.http.get_json(self.settings.api_url, params=params)
        except TransportError as exc:
            with self._health_lock:
                self._health = HealthStatus(
                    name=self.name,
                    healthy=False,
                    last_error=str(exc),
                    last_success=self._health.last_success,
                    latency_ms=(time.time() - start) * 1000,
                )
            raise

        articles = transform_batch(payload, limit, preview_chars=self.settings.body_preview_chars)
        with self._health_lock:
            self._health = HealthStatus(
                name=self.name,
                healthy=True,
                last_success=datetime.now(timezone.utc),
                items_last_fetch=len(articles),
                latency_ms=(time.time() - start) * 1000,
            )
        return articles
