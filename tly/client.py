"""TlyClient: entry point for the T.LY API."""

from __future__ import annotations

from typing import Any, Optional

from tly.api.v1 import LinksResource, PixelsResource, StatsResource, TagsResource
from tly.config import DEFAULT_BASE_URL, ClientSettings
from tly.dispatcher import RequestDispatcher
from tly.errors import ConfigurationError
from tly.infrastructure.http_client import HttpClient
from tly.shared.logging import setup_logging


class TlyClient:
    """Synchronous T.LY API client.

    Holds the credential context (base URL, bearer token, transport) for the
    life of the process. Safe to share between threads: no call mutates it.

    Example:
        >>> with TlyClient("my-token") as client:
        ...     link = client.links.create(
        ...         ShortLinkCreateRequest(long_url="https://example.com")
        ...     )
        ...     print(link.short_url)
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: Optional[float] = None,
        http_client: Optional[HttpClient] = None,
    ) -> None:
        # A caller-supplied HttpClient stays open after close()
        self._owns_http = http_client is None
        self._http = http_client or HttpClient(timeout=timeout)
        self._dispatcher = RequestDispatcher(api_key, self._http, base_url=base_url)

        self.pixels = PixelsResource(self._dispatcher)
        self.links = LinksResource(self._dispatcher)
        self.stats = StatsResource(self._dispatcher)
        self.tags = TagsResource(self._dispatcher)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[ClientSettings] = None,
        *,
        http_client: Optional[HttpClient] = None,
    ) -> "TlyClient":
        """Build a client from ``TLY_*`` environment settings.

        When ``TLY_LOG_LEVEL`` or ``TLY_LOG_FORMAT`` is set, the ``tly`` logger is
        configured with them through setup_logging().
        """
        settings = settings or ClientSettings()
        if not settings.has_api_key:
            raise ConfigurationError("TLY_API_KEY is not configured")
        if settings.logging is not None and settings.logging.model_fields_set:
            setup_logging(settings.logging)
        return cls(
            settings.api_key,
            settings.base_url,
            timeout=settings.timeout,
            http_client=http_client,
        )

    @property
    def base_url(self) -> str:
        return self._dispatcher.base_url

    @property
    def dispatcher(self) -> RequestDispatcher:
        return self._dispatcher

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "TlyClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
