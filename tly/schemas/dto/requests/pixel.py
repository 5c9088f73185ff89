"""
Request DTOs for pixel management endpoints.
"""

from __future__ import annotations

from tly.schemas.base import RequestModel


class PixelCreateRequest(RequestModel):
    """Request body for POST /api/v1/link/pixel."""

    name: str
    pixel_id: str
    # e.g. "googletagmanager", "facebook", "googleanalytics"
    pixel_type: str


class PixelUpdateRequest(RequestModel):
    """Request body for PUT /api/v1/link/pixel/{id}.

    ``id`` is sent in the body and also selects the path.
    """

    id: int
    name: str
    pixel_id: str
    pixel_type: str
