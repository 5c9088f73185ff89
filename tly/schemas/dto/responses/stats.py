"""
Response record for GET /api/v1/link/stats.

A point-in-time snapshot. The breakdown lists are passed through as the
service sends them; this client does no aggregation. A null breakdown reads
as an empty list.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import Field

from tly.schemas.base import ResponseModel


class LinkStats(ResponseModel):
    clicks: int = 0
    unique_clicks: int = 0
    browsers: list[Any] = Field(default_factory=list)
    countries: list[Any] = Field(default_factory=list)
    referrers: list[Any] = Field(default_factory=list)
    platforms: list[Any] = Field(default_factory=list)
    daily_clicks: list[Any] = Field(default_factory=list)
    data: Optional[dict[str, Any]] = None
