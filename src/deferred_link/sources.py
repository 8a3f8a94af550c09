"""Deferred deep-link lookups over platform-provided text.

How the install referrer or the clipboard text is obtained is up to the
caller: each source is a zero-argument callable returning the raw string,
or None when nothing is available.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

import structlog

from deferred_link.matching import match_deep_link
from deferred_link.models import DeepLinkResult, ReferrerInfo
from deferred_link.utils.urls import extract_domain

TextSource = Callable[[], str | None]


def get_install_referrer(
    source: TextSource,
    log: structlog.stdlib.BoundLogger | None = None,
) -> ReferrerInfo:
    """Read the install referrer string and wrap it for parameter access."""
    log = log or structlog.get_logger("deferred_link")
    raw = source() or ""
    info = ReferrerInfo(install_referrer=raw)
    log.info("sources.install_referrer", params=len(info.as_query_parameters))
    return info


def get_clipboard_deep_link(
    source: TextSource,
    deep_links: Sequence[str],
    log: structlog.stdlib.BoundLogger | None = None,
) -> DeepLinkResult | None:
    """Return the clipboard text as a DeepLinkResult if any pattern accepts it.

    Patterns are tried in order and the first match wins. Blank clipboard
    text or an empty pattern list yields None without matching.
    """
    log = log or structlog.get_logger("deferred_link")

    if not deep_links:
        log.debug("sources.no_patterns")
        return None

    text = source()
    if not text or not text.strip():
        log.debug("sources.clipboard_empty")
        return None

    result = match_deep_link(text, deep_links)
    if result is None:
        log.info("sources.no_match", patterns=len(deep_links))
        return None

    log.info("sources.deep_link_found", link=result.full_deep_link, domain=extract_domain(result.full_deep_link))
    return result
