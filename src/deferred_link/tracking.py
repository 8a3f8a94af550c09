"""Click tracking — reports a deep link's clickId to the tracking API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx
import structlog

from deferred_link.models import PathParams
from deferred_link.utils.http import create_http_client

if TYPE_CHECKING:
    from deferred_link.models import DeepLinkResult

DEFAULT_TRACKING_BASE_URL = "https://smler.in/api/v2"

CLICK_ID_PARAM = "clickId"


def build_tracking_body(path_params: PathParams, domain: str | None) -> dict[str, str]:
    """Request body with only the non-empty fields."""
    body: dict[str, str] = {}
    if path_params.short_code:
        body["shortCode"] = path_params.short_code
    if path_params.dlt_header:
        body["dltHeader"] = path_params.dlt_header
    if domain:
        body["domain"] = domain
    return body


def fetch_tracking_data(
    click_id: str,
    path_params: PathParams,
    domain: str | None,
    client: httpx.Client,
    log: structlog.stdlib.BoundLogger,
    *,
    base_url: str = DEFAULT_TRACKING_BASE_URL,
) -> dict[str, Any]:
    """POST the click to ``{base_url}/track/{click_id}``.

    Never raises: a non-200 status becomes {"error": "HTTP <status>", "message": <body>}
    and any other failure becomes {"error": "Exception", "message": <description>}.
    """
    url = f"{base_url.rstrip('/')}/track/{click_id}"
    body = build_tracking_body(path_params, domain)

    try:
        resp = client.post(url, json=body, headers={"Content-Type": "application/json"})

        if resp.status_code != 200:
            log.warning("tracking.http_error", url=url, status=resp.status_code)
            return {"error": f"HTTP {resp.status_code}", "message": resp.text}

        data = resp.json()
        if not isinstance(data, dict):
            log.warning("tracking.unexpected_body", url=url, body_type=type(data).__name__)
            return {"error": "Exception", "message": f"Expected a JSON object, got {type(data).__name__}"}

        log.info("tracking.click_sent", click_id=click_id, domain=domain)
        return data

    except httpx.HTTPError as exc:
        log.warning("tracking.request_failed", url=url, error=str(exc))
        return {"error": "Exception", "message": str(exc)}

    except Exception as exc:
        log.exception("tracking.request_failed", url=url)
        return {"error": "Exception", "message": str(exc)}


class TrackingClient:
    """Sends click events for matched deep links.

    *client* is used as-is when given; otherwise a fresh httpx client is
    created for each call and closed afterwards.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_TRACKING_BASE_URL,
        *,
        client: httpx.Client | None = None,
        proxy_url: str | None = None,
        timeout: float = 30.0,
        log: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self.base_url = base_url
        self._client = client
        self._proxy_url = proxy_url
        self._timeout = timeout
        self._log = log or structlog.get_logger("deferred_link")

    def track_click(self, result: DeepLinkResult) -> dict[str, Any] | None:
        """Report *result*'s clickId. Returns None, without a request, if it has none."""
        click_id = result.get_param(CLICK_ID_PARAM)
        if not click_id:
            self._log.debug("tracking.no_click_id", link=result.full_deep_link)
            return None

        path_params = result.extract_short_code_and_dlt_header()
        domain = result.uri.host

        if self._client is not None:
            return fetch_tracking_data(click_id, path_params, domain, self._client, self._log, base_url=self.base_url)

        client = create_http_client(proxy_url=self._proxy_url, timeout=self._timeout)
        try:
            return fetch_tracking_data(click_id, path_params, domain, client, self._log, base_url=self.base_url)
        finally:
            client.close()
