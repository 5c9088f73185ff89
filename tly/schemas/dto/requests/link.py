"""
Request DTOs for short link endpoints.

Every optional field is left out of the request body unless the caller assigns
it. Assigning ``None`` explicitly sends ``null``.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import Field

from tly.schemas.base import RequestModel


class ShortLinkCreateRequest(RequestModel):
    """Request body for POST /api/v1/link/shorten."""

    long_url: str
    short_id: Optional[str] = None
    # Service default (https://t.ly/) applies when omitted
    domain: Optional[str] = None
    expire_at_datetime: Optional[str] = None
    expire_at_views: Optional[int] = Field(default=None, ge=0)
    description: Optional[str] = None
    public_stats: Optional[bool] = None
    password: Optional[str] = None
    tags: Optional[list[int]] = None
    pixels: Optional[list[int]] = None
    meta: Optional[Any] = None


class ShortLinkUpdateRequest(RequestModel):
    """Request body for PUT /api/v1/link.

    ``short_url`` identifies the link; ``long_url`` is always resent.
    """

    short_url: str
    short_id: Optional[str] = None
    long_url: str
    expire_at_datetime: Optional[str] = None
    expire_at_views: Optional[int] = Field(default=None, ge=0)
    description: Optional[str] = None
    public_stats: Optional[bool] = None
    password: Optional[str] = None
    tags: Optional[list[int]] = None
    pixels: Optional[list[int]] = None
    meta: Optional[Any] = None


class ShortLinkDeleteRequest(RequestModel):
    """Request body for DELETE /api/v1/link."""

    short_url: str


class ExpandRequest(RequestModel):
    """Request body for POST /api/v1/link/expand."""

    short_url: str
    password: Optional[str] = None


class BulkShortenRequest(RequestModel):
    """Request body for POST /api/v1/link/bulk."""

    domain: str
    links: list[str]
    tags: Optional[list[int]] = None
    pixels: Optional[list[int]] = None
