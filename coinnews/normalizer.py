"""
Map raw CryptoCompare payloads to Article records.

Schema drift is handled by default substitution: a missing ``Data`` list yields
no articles, unusable rows are skipped and missing optional fields become None
or empty sets.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, FrozenSet, List, Mapping, Optional

from coinnews.dedupe import dedupe_by_title
from coinnews.models import Article

logger = logging.getLogger(__name__)

DEFAULT_PREVIEW_CHARS = 200
ELLIPSIS = "..."


def extract_items(payload: Any) -> List[Mapping[str, Any]]:
    """Return the usable raw items from a response body."""
    data = payload.get("Data") if isinstance(payload, Mapping) else None
    if not isinstance(data, list):
        logger.warning("News payload has no Data list; treating as empty")
        return []

    items: List[Mapping[str, Any]] = []
    for raw in data:
        if not isinstance(raw, Mapping):
            continue
        title = raw.get("title")
        if not isinstance(title, str) or not title.strip():
            logger.debug("Skipping untitled item %s", raw.get("id"))
            continue
        items.append(raw)
    return items


def _preview(body: Any, max_chars: int) -> Optional[str]:
    if not isinstance(body, str) or not body:
        return None
    if len(body) <= max_chars:
        return body
    return body[:max_chars] + ELLIPSIS


def _split_pipe(value: Any) -> FrozenSet[str]:
    if not isinstance(value, str):
        return frozenset()
    return frozenset(token.strip() for token in value.split("|") if token.strip())


def _source_name(raw: Mapping[str, Any]) -> str:
    info = raw.get("source_info")
    if isinstance(info, Mapping):
        name = info.get("name")
        if isinstance(name, str) and name.strip():
            return name.strip()
    source = raw.get("source")
    if isinstance(source, str) and source.strip():
        return source.strip()
    return "unknown"


def _from_epoch(value: Any) -> Optional[datetime]:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        return None
    try:
        return datetime.fromtimestamp(float(value), tz=timezone.utc)
    except (ValueError, OverflowError, OSError):
        return None


def _optional_str(value: Any) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    return None


def to_article(raw: Mapping[str, Any], *, preview_chars: int = DEFAULT_PREVIEW_CHARS) -> Article:
    raw_id = raw.get("id")
    return Article(
        id="" if raw_id is None else str(raw_id),
        title=str(raw.get("title") or "").strip(),
        body_snippet=_preview(raw.get("body"), preview_chars),
        source=_source_name(raw),
        published_at=_from_epoch(raw.get("published_on")),
        url=str(raw.get("url") or ""),
        image_url=_optional_str(raw.get("imageurl")),
        categories=_split_pipe(raw.get("categories")),
        tags=_split_pipe(raw.get("tags")),
    )


def transform_batch(payload: Any, limit: int, *, preview_chars: int = DEFAULT_PREVIEW_CHARS) -> List[Article]:
    """Dedupe, truncate to ``limit`` and normalize a raw response body."""
    items = dedupe_by_title(extract_items(payload))
    return [to_article(raw, preview_chars=preview_chars) for raw in items[:limit]]


def to_dicts(articles: List[Article]) -> List[Dict[str, object]]:
    return [article.to_dict() for article in articles]
