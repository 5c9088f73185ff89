"""
Response records for short link endpoints.

ShortLink:     POST /api/v1/link/shorten, GET /api/v1/link, PUT /api/v1/link
ExpandedLink:  POST /api/v1/link/expand
RawText:       GET /api/v1/link/list, POST /api/v1/link/bulk

The list and bulk endpoints deliver their data as a JSON *string* that itself
contains JSON. RawText is that string after one level of decoding; callers run
``json.loads`` on it when they want structured access.
"""

from __future__ import annotations

from typing import Any, NewType, Optional, Union

from tly.schemas.base import ResponseModel

RawText = NewType("RawText", str)


class ShortLink(ResponseModel):
    short_url: str
    description: Optional[str] = None
    long_url: str
    domain: Optional[str] = None
    short_id: Optional[str] = None
    # The service has returned both numbers and numeric strings here
    expire_at_views: Optional[Union[int, str]] = None
    expire_at_datetime: Optional[str] = None
    public_stats: bool = False
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    meta: Optional[Any] = None


class ExpandedLink(ResponseModel):
    long_url: str
    expired: bool = False
