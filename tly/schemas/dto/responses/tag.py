"""
Response records for tag endpoints.
"""

from __future__ import annotations

from typing import Optional

from tly.schemas.base import ResponseModel


class Tag(ResponseModel):
    id: int
    tag: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
