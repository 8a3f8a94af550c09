"""Pydantic models for matched deep links and install referrers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qsl

from pydantic import BaseModel, ConfigDict, Field

from deferred_link.utils.urls import ParsedUri

if TYPE_CHECKING:
    from deferred_link.tracking import TrackingClient


class PathParams(BaseModel):
    """Short code and optional DLT header taken from a deep-link path."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    short_code: str = Field(default="", alias="shortCode")
    dlt_header: str | None = Field(default=None, alias="dltHeader")


class DeepLinkResult(BaseModel):
    """A deep link read from the clipboard that matched an accepted pattern.

    For "https://example.com/?referrer=home&uid=10":
        full_deep_link          -> the string exactly as matched
        query_parameters        -> {"referrer": "home", "uid": "10"}
        get_param("referrer")   -> "home"
    """

    model_config = ConfigDict(frozen=True)

    full_deep_link: str
    uri: ParsedUri

    @property
    def full_referral_deep_link_path(self) -> str:
        return self.full_deep_link

    @property
    def query_parameters(self) -> dict[str, str]:
        return self.uri.query_parameters

    def get_param(self, key: str) -> str | None:
        return self.query_parameters.get(key)

    def extract_short_code_and_dlt_header(self) -> PathParams:
        """Split the path into an optional DLT header and a short code.

        "/promo/abc123" -> header "promo", short code "abc123"
        "/abc123"       -> no header, short code "abc123"
        "/"             -> no header, empty short code

        Segments past the second are ignored.
        """
        segments = self.uri.path_segments
        if not segments:
            return PathParams(short_code="", dlt_header=None)
        if len(segments) >= 2:
            return PathParams(short_code=segments[1], dlt_header=segments[0])
        return PathParams(short_code=segments[0], dlt_header=None)

    def track_click(self, client: TrackingClient | None = None) -> dict[str, Any] | None:
        """Report this link's clickId; returns None when there is none."""
        from deferred_link.tracking import TrackingClient

        return (client or TrackingClient()).track_click(self)

    def __str__(self) -> str:
        return f"DeepLinkResult(full_deep_link={self.full_deep_link}, query_parameters={self.query_parameters})"


class ReferrerInfo(BaseModel):
    """Install referrer handed over by the app store after installation."""

    model_config = ConfigDict(frozen=True)

    install_referrer: str = ""

    @property
    def as_query_parameters(self) -> dict[str, str]:
        """Referrer parsed as a query string, e.g. "referrer=home&uid=10"."""
        return dict(parse_qsl(self.install_referrer.strip(), keep_blank_values=True))

    def get_param(self, key: str) -> str | None:
        return self.as_query_parameters.get(key)
