"""
Error types raised by the news service.
"""
from __future__ import annotations

from typing import Optional


class NewsError(Exception):
    """Base class for news service errors."""


class TransportError(NewsError):
    """Raised when the news source cannot be reached or returns an unusable response."""

    def __init__(self, message: str, *, url: Optional[str] = None, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
