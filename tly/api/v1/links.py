"""
Short link operations.

``short_url`` values are placed in the query string as given. A short URL
containing reserved characters (``&``, ``#``, ``+``, spaces) must be
percent-encoded by the caller.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from tly.api.v1 import endpoints
from tly.api.v1.base import Resource
from tly.builders.query import build_query
from tly.schemas.dto.requests.link import (
    BulkShortenRequest,
    ExpandRequest,
    ShortLinkCreateRequest,
    ShortLinkDeleteRequest,
    ShortLinkUpdateRequest,
)
from tly.schemas.dto.responses.link import ExpandedLink, RawText, ShortLink


class LinksResource(Resource):
    def create(self, request: ShortLinkCreateRequest) -> ShortLink:
        return self._call(endpoints.SHORTEN_LINK, payload=request)

    def get(self, short_url: str) -> ShortLink:
        return self._call(endpoints.GET_LINK, query=build_query({"short_url": short_url}))

    def update(self, request: ShortLinkUpdateRequest) -> ShortLink:
        return self._call(endpoints.UPDATE_LINK, payload=request)

    def delete(self, short_url: str) -> None:
        self._call(
            endpoints.DELETE_LINK, payload=ShortLinkDeleteRequest(short_url=short_url)
        )

    def expand(self, request: ExpandRequest) -> ExpandedLink:
        return self._call(endpoints.EXPAND_LINK, payload=request)

    def list(self, params: Optional[Mapping[str, Any]] = None) -> RawText:
        """List short links, optionally filtered.

        ``params`` may include keys such as ``search``, ``tag_ids`` or
        ``pixel_ids``. The result is the JSON text the service delivers; decode
        it with ``json.loads`` for structured access.
        """
        return self._call(endpoints.LIST_LINKS, query=build_query(params))

    def bulk_shorten(self, request: BulkShortenRequest) -> RawText:
        """Shorten many URLs in one call. Returns the service's JSON text."""
        return self._call(endpoints.BULK_SHORTEN, payload=request)
