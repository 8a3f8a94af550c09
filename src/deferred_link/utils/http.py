"""Shared HTTP client factory for httpx-based tracking calls."""

from __future__ import annotations

import httpx

USER_AGENT = "deferred-link/0.1 (+https://smler.in)"


def create_http_client(
    *,
    proxy_url: str | None = None,
    user_agent: str = USER_AGENT,
    timeout: float = 30.0,
) -> httpx.Client:
    """Create an httpx.Client with the library User-Agent and optional proxy."""
    headers = {"User-Agent": user_agent}
    return httpx.Client(
        headers=headers,
        timeout=timeout,
        proxy=proxy_url,
    )
