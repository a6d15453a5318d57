"""
Public API for the crypto news service.

The module-level helpers delegate to one service instance built from the
environment on import; build a NewsService directly to inject your own cache
or HTTP client.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from coinnews.cache import NewsCache
from coinnews.exceptions import NewsError, TransportError
from coinnews.models import Article, FetchResult, FetchStatus
from coinnews.service import NewsService
from coinnews.settings import NewsSettings, load_settings
from coinnews.status import build_status
from coinnews.timefmt import format_time_ago

SETTINGS: NewsSettings = load_settings()
_service = NewsService(cache=NewsCache(ttl_seconds=SETTINGS.cache_ttl_seconds), settings=SETTINGS)


def fetch_coin_news(symbol: str, limit: Optional[int] = None) -> List[Article]:
    return _service.fetch_topic_news(symbol, limit)


def fetch_general_news(limit: Optional[int] = None) -> List[Article]:
    return _service.fetch_general_news(limit)


def clear_news_cache() -> None:
    _service.clear_cache()


def get_status() -> Dict[str, Any]:
    return build_status(_service)


__all__ = [
    "Article",
    "FetchResult",
    "FetchStatus",
    "NewsCache",
    "NewsError",
    "NewsService",
    "NewsSettings",
    "TransportError",
    "build_status",
    "clear_news_cache",
    "fetch_coin_news",
    "fetch_general_news",
    "format_time_ago",
    "get_status",
    "load_settings",
]
