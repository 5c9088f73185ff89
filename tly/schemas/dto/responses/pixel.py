"""
Response records for pixel endpoints.
"""

from __future__ import annotations

from typing import Optional

from tly.schemas.base import ResponseModel


class Pixel(ResponseModel):
    id: int
    name: str
    pixel_id: str
    pixel_type: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
