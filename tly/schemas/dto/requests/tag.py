"""
Request DTOs for tag endpoints.
"""

from __future__ import annotations

from tly.schemas.base import RequestModel


class TagRequest(RequestModel):
    """Request body for POST /api/v1/link/tag and PUT /api/v1/link/tag/{id}."""

    tag: str
