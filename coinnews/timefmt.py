"""
Relative time labels for article timestamps.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def format_time_ago(when: datetime, now: Optional[datetime] = None) -> str:
    """
    Render ``when`` as "Nm ago", "Nh ago" or "Nd ago", or as a locale date after a week.

    Future timestamps produce negative minutes rather than an error.
    """
    if now is None:
        now = datetime.now(timezone.utc) if when.tzinfo else datetime.now()
    seconds = (now - when).total_seconds()

    minutes = int(seconds // 60)
    hours = int(seconds // 3600)
    days = int(seconds // 86400)

    if minutes < 60:
        return f"{minutes}m ago"
    if hours < 24:
        return f"{hours}h ago"
    if days < 7:
        return f"{days}d ago"
    local = when.astimezone() if when.tzinfo else when
    return local.strftime("%x")
