"""Tests for install-referrer and clipboard lookups."""

from __future__ import annotations

from unittest.mock import MagicMock

from deferred_link.sources import get_clipboard_deep_link, get_install_referrer

PATTERNS = [
    "https://go.example.com/profile",
    "http://go.example.com/profile",
    "go.example.com/profile",
    "go.example.com",
]


class TestGetInstallReferrer:
    def test_wraps_raw_string(self, log):
        info = get_install_referrer(lambda: "utm_source=google&referrer=home", log)
        assert info.install_referrer == "utm_source=google&referrer=home"
        assert info.get_param("referrer") == "home"

    def test_missing_referrer(self, log):
        info = get_install_referrer(lambda: None, log)
        assert info.install_referrer == ""
        assert info.as_query_parameters == {}


class TestGetClipboardDeepLink:
    def test_match(self, log):
        result = get_clipboard_deep_link(lambda: "https://go.example.com/profile?referrer=home&uid=10", PATTERNS, log)

        assert result is not None
        assert result.full_deep_link == "https://go.example.com/profile?referrer=home&uid=10"
        assert result.query_parameters == {"referrer": "home", "uid": "10"}
        log.info.assert_called_once()

    def test_logs_matched_domain(self, log):
        get_clipboard_deep_link(lambda: "https://www.Go.Example.com/profile", PATTERNS, log)

        log.info.assert_called_once_with(
            "sources.deep_link_found", link="https://www.Go.Example.com/profile", domain="go.example.com"
        )

    def test_clipboard_text_is_trimmed(self, log):
        result = get_clipboard_deep_link(lambda: "  go.example.com/abc?clickId=1\n", PATTERNS, log)

        assert result is not None
        assert result.full_deep_link == "go.example.com/abc?clickId=1"
        assert result.uri.scheme == "https"

    def test_no_match(self, log):
        assert get_clipboard_deep_link(lambda: "https://other.com/profile", PATTERNS, log) is None
        log.info.assert_called_once()

    def test_empty_clipboard(self, log):
        assert get_clipboard_deep_link(lambda: None, PATTERNS, log) is None
        assert get_clipboard_deep_link(lambda: "   ", ["*"], log) is None

    def test_no_patterns_skips_clipboard(self, log):
        source = MagicMock(return_value="https://go.example.com/profile")

        assert get_clipboard_deep_link(source, [], log) is None
        source.assert_not_called()

    def test_global_wildcard(self, log):
        result = get_clipboard_deep_link(lambda: "anything.net/x", ["*"], log)
        assert result is not None
        assert result.uri.host == "anything.net"
