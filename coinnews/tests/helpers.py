from __future__ import annotations

from typing import Any, Dict, List, Optional


class FakeClock:
    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def raw_article(idx: int, title: Optional[str] = None, **overrides: Any) -> Dict[str, Any]:
    item: Dict[str, Any] = {
        "id": str(1000 + idx),
        "title": title or f"Story number {idx} about bitcoin markets",
        "body": f"Body text for story {idx}.",
        "source": "cointelegraph",
        "source_info": {"name": "CoinTelegraph", "lang": "EN"},
        "published_on": 1_700_000_000 - idx * 60,
        "url": f"https://example.com/news/{idx}",
        "imageurl": f"https://example.com/img/{idx}.png",
        "categories": "BTC|Market",
        "tags": "Bitcoin|Trading",
    }
    item.update(overrides)
    return item


def payload(items: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"Type": 100, "Message": "News list successfully returned", "Data": items}
