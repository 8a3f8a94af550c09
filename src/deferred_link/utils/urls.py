"""URL-like string helpers — scheme stripping, lenient parsing, host bases."""

from __future__ import annotations

import re
from urllib.parse import parse_qsl, unquote, urlsplit

from pydantic import BaseModel, ConfigDict

_SCHEMES = ("https://", "http://")

# Characters a URI authority can never contain
_INVALID_AUTHORITY_CHARS = re.compile(r'[\s<>"{}|\\^`]')


class ParsedUri(BaseModel):
    """Structured view of a URL-like string."""

    model_config = ConfigDict(frozen=True)

    scheme: str
    host: str
    port: int | None = None
    path: str = ""
    query: str = ""
    fragment: str = ""
    has_authority: bool = True

    @property
    def query_parameters(self) -> dict[str, str]:
        """Decoded query parameters; the last value wins for repeated keys."""
        return dict(parse_qsl(self.query, keep_blank_values=True))

    @property
    def path_segments(self) -> list[str]:
        """Decoded, non-empty path segments in order."""
        return [unquote(s) for s in self.path.split("/") if s]


def normalize_url_like(value: str) -> str:
    """Trim *value* and strip a leading http:// or https:// (any case).

    "https://example.com/p?x=1", "HTTP://example.com/p?x=1" and
    "example.com/p?x=1" all become "example.com/p?x=1".
    """
    v = value.strip()
    lowered = v.lower()
    for scheme in _SCHEMES:
        if lowered.startswith(scheme):
            return v[len(scheme):]
    return v


def _raw_authority(candidate: str) -> str:
    # urlsplit drops tabs and newlines, so the authority is checked before it runs
    _, sep, rest = candidate.partition("//")
    if not sep:
        return ""
    return re.split(r"[/?#]", rest, maxsplit=1)[0]


def _try_parse(candidate: str) -> ParsedUri | None:
    if _INVALID_AUTHORITY_CHARS.search(_raw_authority(candidate)):
        return None

    try:
        parts = urlsplit(candidate)
        port = parts.port
    except ValueError:
        return None

    has_authority = candidate[len(parts.scheme) + 1:].startswith("//")
    host = parts.hostname or ""
    if not host and not has_authority:
        return None

    return ParsedUri(
        scheme=parts.scheme,
        host=host,
        port=port,
        path=parts.path,
        query=parts.query,
        fragment=parts.fragment,
        has_authority=has_authority,
    )


def parse_to_uri(value: str) -> ParsedUri | None:
    """Parse a URL-like string, assuming https:// when no scheme is present.

    Returns None instead of raising on unparsable input.
    """
    trimmed = value.strip()
    if trimmed.lower().startswith(_SCHEMES):
        return _try_parse(trimmed)
    return _try_parse(f"https://{trimmed}")


def strip_www(host: str) -> str:
    """Lowercase *host* and drop a leading www."""
    host = host.lower()
    if host.startswith("www."):
        host = host[4:]
    return host


def extract_domain(url: str | None) -> str | None:
    """Extract the domain from a URL-like string, stripping www. prefix."""
    if not url:
        return None
    uri = parse_to_uri(url)
    if uri is None:
        return None
    return strip_www(uri.host) or None
