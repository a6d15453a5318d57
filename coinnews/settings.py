"""
Centralised settings for the news service (env-first, code-light).
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://min-api.cryptocompare.com/data/v2/news/"


@dataclass
class NewsSettings:
    api_url: str = DEFAULT_API_URL
    cache_ttl_seconds: int = 300
    http_timeout: int = 15
    http_max_retries: int = 0
    topic_limit: int = 10
    general_limit: int = 20
    body_preview_chars: int = 200
    language: str = "EN"
    exclude_categories: str = "Sponsored"
    user_agent: str = "CoinNews/1.0"


def _int_from_env(key: str, default: int, *, allow_zero: bool = False) -> int:
    raw = os.getenv(key)
    if raw is None or str(raw).strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int value for %s=%s; using default %s", key, raw, default)
        return default
    if value > 0 or (allow_zero and value == 0):
        return value
    logger.warning("Out of range value for %s=%s; using default %s", key, raw, default)
    return default


def _str_from_env(key: str, default: str) -> str:
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip()


def load_settings() -> NewsSettings:
    defaults = NewsSettings()
    return NewsSettings(
        api_url=_str_from_env("NEWS_API_URL", defaults.api_url),
        cache_ttl_seconds=_int_from_env("NEWS_CACHE_TTL", defaults.cache_ttl_seconds, allow_zero=True),
        http_timeout=_int_from_env("NEWS_HTTP_TIMEOUT", defaults.http_timeout),
        http_max_retries=_int_from_env("NEWS_HTTP_MAX_RETRIES", defaults.http_max_retries, allow_zero=True),
        topic_limit=_int_from_env("NEWS_TOPIC_LIMIT", defaults.topic_limit),
        general_limit=_int_from_env("NEWS_GENERAL_LIMIT", defaults.general_limit),
        body_preview_chars=_int_from_env("NEWS_BODY_PREVIEW_CHARS", defaults.body_preview_chars),
        language=_str_from_env("NEWS_LANGUAGE", defaults.language),
        exclude_categories=_str_from_env("NEWS_EXCLUDE_CATEGORIES", defaults.exclude_categories),
        user_agent=_str_from_env("NEWS_USER_AGENT", defaults.user_agent),
    )
