from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from tracelink.config import BASE_URL, ClientConfig
from tracelink.errors import TracelinkError
from tracelink.schemas import Envelope, RequestOptions, coerce

logger = logging.getLogger(__name__)

CACHE_HEADER = "X-ResultFromCache"


class Dispatcher:
    """Single POST chokepoint shared by every resource facade."""

    def __init__(
        self,
        config: ClientConfig,
        *,
        base_url: str = BASE_URL,
        timeout_s: float | None = None,
        http_client: httpx.Client | None = None,
    ):
        self.config = config
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self.http_client = http_client

    def build_headers(self, options: RequestOptions) -> dict[str, str]:
        headers = {
            "x-access-token": self.config.access_token,
            "Content-Type": "application/json",
            "Accept": "application/xml" if self.config.format == "xml" else "application/json",
        }
        if self.config.charset == "CP850":
            headers["X-Charset"] = "CP850"
        if options.idempotency_key:
            headers["Idempotency-Key"] = options.idempotency_key
        return headers

    def _post(self, url: str, body: dict[str, Any], headers: dict[str, str]) -> httpx.Response:
        if self.http_client is not None:
            return self.http_client.post(url, json=body, headers=headers)
        with httpx.Client(timeout=self.timeout_s) as client:
            return client.post(url, json=body, headers=headers)

    def dispatch(
        self,
        endpoint: str,
        body: dict[str, Any] | None = None,
        options: RequestOptions | Mapping[str, Any] | None = None,
    ) -> Envelope:
        opts = coerce(RequestOptions, options)
        logger.debug(
            "tracelink_request endpoint=%s idempotent=%s",
            endpoint,
            opts.idempotency_key is not None,
        )
        response = self._post(f"{self.base_url}{endpoint}", body or {}, self.build_headers(opts))
        data: Envelope = response.json()

        cached_key = response.headers.get(CACHE_HEADER)
        if cached_key:
            data["_cached"] = True
            data["_idempotency_key"] = cached_key

        if data.get("status") == "error":
            logger.warning(
                "tracelink_error endpoint=%s code=%s message=%s",
                endpoint,
                data.get("code"),
                data.get("message"),
            )
            raise TracelinkError(data.get("message", ""), data.get("code"), response=data)

        logger.debug(
            "tracelink_response endpoint=%s status=%s code=%s count=%s cached=%s",
            endpoint,
            data.get("status"),
            data.get("code"),
            data.get("count"),
            bool(cached_key),
        )
        return data
