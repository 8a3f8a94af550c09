"""Deep-link pattern matching.

A pattern may carry an optional scheme, an optional ``www.``, a host that is
optionally prefixed with ``*.`` and an optional path that is optionally
suffixed with ``/*``. The bare pattern ``*`` accepts anything URL-like.

Examples::

    matches_deep_link_pattern("https://sub.example.com/profile?x=1", "https://example.com/profile")  # True
    matches_deep_link_pattern("https://m.example.com/offer?id=1", "example.com")  # True
    matches_deep_link_pattern("https://foo.example.com/profile/settings", "*.example.com/profile/*")  # True
"""

from __future__ import annotations

from collections.abc import Iterable

from deferred_link.models import DeepLinkResult
from deferred_link.utils.urls import normalize_url_like, parse_to_uri, strip_www

GLOBAL_WILDCARD = "*"


def _host_matches(candidate_host: str, pattern_host: str) -> bool:
    if pattern_host.startswith("*."):
        base = pattern_host[2:]
        return candidate_host == base or candidate_host.endswith(f".{base}")
    # Same host, or candidate is a subdomain of the pattern host
    return candidate_host == pattern_host or candidate_host.endswith(f".{pattern_host}")


def _path_matches(candidate_path: str, pattern_path: str) -> bool:
    if pattern_path in ("", "/"):
        return True
    if pattern_path in ("/*", "*"):
        return True
    if pattern_path.endswith("/*"):
        # "/profile/*" -> "/profile/", trailing slash kept
        return candidate_path.startswith(pattern_path[:-1])
    return candidate_path.startswith(pattern_path)


def matches_deep_link_pattern(candidate: str, pattern: str) -> bool:
    """Return True if *candidate* is accepted by *pattern*."""
    pattern = pattern.strip()

    if pattern == GLOBAL_WILDCARD:
        return parse_to_uri(candidate) is not None

    # Literal/prefix fast path, checked before the structured rules
    normalized_candidate = normalize_url_like(candidate)
    normalized_pattern = normalize_url_like(pattern)
    if normalized_candidate.startswith(normalized_pattern):
        return True

    candidate_uri = parse_to_uri(candidate)
    pattern_uri = parse_to_uri(pattern)
    if candidate_uri is None or pattern_uri is None:
        return False

    candidate_host = strip_www(candidate_uri.host)
    pattern_host = strip_www(pattern_uri.host)
    if not candidate_host or not pattern_host:
        return False

    if not _host_matches(candidate_host, pattern_host):
        return False

    return _path_matches(candidate_uri.path or "/", pattern_uri.path)


def find_matching_pattern(candidate: str, patterns: Iterable[str]) -> str | None:
    """Return the first pattern, in the given order, that accepts *candidate*."""
    for pattern in patterns:
        if matches_deep_link_pattern(candidate, pattern):
            return pattern
    return None


def match_deep_link(candidate: str, patterns: Iterable[str]) -> DeepLinkResult | None:
    """Match *candidate* against *patterns* and wrap it in a DeepLinkResult.

    Returns None when no pattern matches or the matched text does not parse.
    """
    if find_matching_pattern(candidate, patterns) is None:
        return None

    full_link = candidate.strip()
    uri = parse_to_uri(full_link)
    if uri is None:
        return None
    return DeepLinkResult(full_deep_link=full_link, uri=uri)
