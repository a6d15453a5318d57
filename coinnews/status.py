"""
Status/health helpers for the news service.

The output is designed for API/UI consumption and never includes article content.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict

from coinnews.models import HealthStatus
from coinnews.service import NewsService


def _health_to_dict(status: HealthStatus) -> Dict[str, Any]:
    return {
        "name": status.name,
        "healthy": status.healthy,
        "last_error": status.last_error,
        "last_success": status.last_success.isoformat() if status.last_success else None,
        "items_last_fetch": status.items_last_fetch,
        "latency_ms": status.latency_ms,
    }


def build_status(service: NewsService) -> Dict[str, Any]:
    settings = service.settings
    return {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "source": _health_to_dict(service.health()),
        "cache": service.cache.snapshot(),
        "config": {
            "api_url": settings.api_url,
            "cache_ttl_seconds": settings.cache_ttl_seconds,
            "http_timeout": settings.http_timeout,
            "default_topic_limit": settings.topic_limit,
            "default_general_limit": settings.general_limit,
        },
    }
