"""
Endpoint catalog for the T.LY v1 API.

Each Endpoint is the fixed (method, path template, result type) triple for one
operation. Path templates use ``str.format`` placeholders, filled in by
path_for() before dispatch. ``result`` is the type a 2xx body decodes into,
RawText for the list/bulk endpoints, or None when the body is discarded.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from tly.schemas.dto.responses.link import ExpandedLink, RawText, ShortLink
from tly.schemas.dto.responses.pixel import Pixel
from tly.schemas.dto.responses.stats import LinkStats
from tly.schemas.dto.responses.tag import Tag


@dataclass(frozen=True)
class Endpoint:
    method: str
    path: str
    result: Optional[Any] = None

    def path_for(self, **params: Any) -> str:
        # bool is an int subclass and would otherwise format as 0 or 1
        for name, value in params.items():
            if isinstance(value, bool):
                raise ValueError(f"path parameter {name!r} must be an integer, not bool")
        return self.path.format(**params)


# Pixels
CREATE_PIXEL = Endpoint("POST", "/api/v1/link/pixel", Pixel)
LIST_PIXELS = Endpoint("GET", "/api/v1/link/pixel", list[Pixel])
GET_PIXEL = Endpoint("GET", "/api/v1/link/pixel/{id:d}", Pixel)
UPDATE_PIXEL = Endpoint("PUT", "/api/v1/link/pixel/{id:d}", Pixel)
DELETE_PIXEL = Endpoint("DELETE", "/api/v1/link/pixel/{id:d}")

# Short links
SHORTEN_LINK = Endpoint("POST", "/api/v1/link/shorten", ShortLink)
GET_LINK = Endpoint("GET", "/api/v1/link", ShortLink)
UPDATE_LINK = Endpoint("PUT", "/api/v1/link", ShortLink)
DELETE_LINK = Endpoint("DELETE", "/api/v1/link")
EXPAND_LINK = Endpoint("POST", "/api/v1/link/expand", ExpandedLink)
LIST_LINKS = Endpoint("GET", "/api/v1/link/list", RawText)
BULK_SHORTEN = Endpoint("POST", "/api/v1/link/bulk", RawText)

# Stats
GET_STATS = Endpoint("GET", "/api/v1/link/stats", LinkStats)

# Tags
LIST_TAGS = Endpoint("GET", "/api/v1/link/tag", list[Tag])
CREATE_TAG = Endpoint("POST", "/api/v1/link/tag", Tag)
GET_TAG = Endpoint("GET", "/api/v1/link/tag/{id:d}", Tag)
UPDATE_TAG = Endpoint("PUT", "/api/v1/link/tag/{id:d}", Tag)
DELETE_TAG = Endpoint("DELETE", "/api/v1/link/tag/{id:d}")

ALL_ENDPOINTS = (
    CREATE_PIXEL,
    LIST_PIXELS,
    GET_PIXEL,
    UPDATE_PIXEL,
    DELETE_PIXEL,
    SHORTEN_LINK,
    GET_LINK,
    UPDATE_LINK,
    DELETE_LINK,
    EXPAND_LINK,
    LIST_LINKS,
    BULK_SHORTEN,
    GET_STATS,
    LIST_TAGS,
    CREATE_TAG,
    GET_TAG,
    UPDATE_TAG,
    DELETE_TAG,
)
