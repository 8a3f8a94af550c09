"""Deferred deep linking: install-referrer parsing, clipboard link matching, click tracking."""

from deferred_link.matching import find_matching_pattern, match_deep_link, matches_deep_link_pattern
from deferred_link.models import DeepLinkResult, PathParams, ReferrerInfo
from deferred_link.sources import get_clipboard_deep_link, get_install_referrer
from deferred_link.tracking import DEFAULT_TRACKING_BASE_URL, TrackingClient, fetch_tracking_data
from deferred_link.utils.urls import ParsedUri, normalize_url_like, parse_to_uri

__all__ = [
    "DEFAULT_TRACKING_BASE_URL",
    "DeepLinkResult",
    "ParsedUri",
    "PathParams",
    "ReferrerInfo",
    "TrackingClient",
    "fetch_tracking_data",
    "find_matching_pattern",
    "get_clipboard_deep_link",
    "get_install_referrer",
    "match_deep_link",
    "matches_deep_link_pattern",
    "normalize_url_like",
    "parse_to_uri",
]
