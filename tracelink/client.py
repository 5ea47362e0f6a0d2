from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from tracelink.config import BASE_URL, Charset, ClientConfig, ResponseFormat, Settings, get_settings
from tracelink.dispatcher import Dispatcher
from tracelink.resources import (
    CompanyResource,
    ObjectResource,
    OrderResource,
    SuborderResource,
    UserResource,
    UtilResource,
)
from tracelink.schemas import Envelope, RequestOptions

logger = logging.getLogger(__name__)


class TracelinkClient:
    """Entry point for the Tracelink REST API.

    Construction validates the access token before any network activity.
    Every facade shares one dispatcher; nothing on the client changes after
    ``__init__``, so one instance can be used from several threads.
    """

    def __init__(
        self,
        access_token: str | None,
        format: ResponseFormat = "json",
        charset: Charset = "UTF-8",
        *,
        base_url: str = BASE_URL,
        timeout_s: float | None = None,
        http_client: httpx.Client | None = None,
    ):
        self.config = ClientConfig(access_token=access_token, format=format, charset=charset)
        self.dispatcher = Dispatcher(
            self.config,
            base_url=base_url,
            timeout_s=timeout_s,
            http_client=http_client,
        )

        self.company = CompanyResource(self.dispatcher)
        self.user = UserResource(self.dispatcher)
        self.order = OrderResource(self.dispatcher)
        self.suborder = SuborderResource(self.dispatcher)
        self.object = ObjectResource(self.dispatcher)
        self.util = UtilResource(self.dispatcher)
        logger.debug("tracelink_client_ready base_url=%s format=%s charset=%s", base_url, format, charset)

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **kwargs: Any) -> "TracelinkClient":
        settings = settings or get_settings()
        return cls(
            settings.access_token,
            settings.format,
            settings.charset,
            base_url=settings.base_url,
            timeout_s=settings.timeout_s,
            **kwargs,
        )

    @property
    def access_token(self) -> str:
        return self.config.access_token

    @property
    def format(self) -> ResponseFormat:
        return self.config.format

    @property
    def charset(self) -> Charset:
        return self.config.charset

    def request(
        self,
        endpoint: str,
        body: dict[str, Any] | None = None,
        options: RequestOptions | Mapping[str, Any] | None = None,
    ) -> Envelope:
        return self.dispatcher.dispatch(endpoint, body, options)
