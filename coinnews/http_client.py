"""
HTTP helper with polite headers used to reach the news source.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests
from urllib3.util.retry import Retry

from coinnews.exceptions import TransportError

logger = logging.getLogger(__name__)


class HttpClient:
    def __init__(self, timeout: int = 15, max_retries: int = 0, user_agent: str | None = None):
        self.timeout = timeout
        self.session = requests.Session()
        retry = Retry(
            total=max_retries,
            backoff_factor=0.6,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["HEAD", "GET", "OPTIONS"],
            raise_on_status=False,
        )
        adapter = requests.adapters.HTTPAdapter(max_retries=retry)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)
        headers = {
            "User-Agent": user_agent or "CoinNews/1.0",
            "Accept": "application/json",
        }
        self.session.headers.update(headers)

    def get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        GET ``url`` and decode the JSON body.

        Raises TransportError on network failure, a non-success status or a body
        that is not valid JSON.
        """
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("HTTP GET exception %s: %s", url, exc)
            raise TransportError(f"News request failed: {exc}", url=url) from exc

        if not resp.ok:
            logger.warning("HTTP GET failed %s %s", resp.status_code, resp.text[:200])
            raise TransportError(f"News API error: {resp.status_code}", url=url, status_code=resp.status_code)

        try:
            return resp.json()
        except ValueError as exc:
            logger.warning("HTTP GET returned invalid JSON from %s", url)
            raise TransportError("News API returned a malformed body", url=url, status_code=resp.status_code) from exc

    def close(self) -> None:
        self.session.close()
