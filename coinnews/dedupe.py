"""
Deduplication helpers for raw article batches.
"""
from __future__ import annotations

import re
from typing import Any, Callable, Hashable, Iterable, List, Mapping, TypeVar

T = TypeVar("T")

TITLE_KEY_CHARS = 50

_PUNCTUATION = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")


def title_key(title: str, length: int = TITLE_KEY_CHARS) -> str:
    """
    Normalized title prefix used to spot syndicated copies of the same story.

    Lower-cased, punctuation stripped, whitespace collapsed, trimmed, cut to ``length``.
    """
    normalized = _PUNCTUATION.sub("", title.lower())
    normalized = _WHITESPACE.sub(" ", normalized).strip()
    return normalized[:length]


def dedupe_by_key(items: Iterable[T], key_fn: Callable[[T], Hashable]) -> List[T]:
    seen = set()
    result: List[T] = []
    for item in items:
        key = key_fn(item)
        if key in seen:
            continue
        seen.add(key)
        result.append(item)
    return result


def dedupe_by_title(items: Iterable[Mapping[str, Any]]) -> List[Mapping[str, Any]]:
    """Keep the first raw item for each normalized title prefix, preserving order."""
    return dedupe_by_key(items, key_fn=lambda item: title_key(str(item.get("title") or "")))
