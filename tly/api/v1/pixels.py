from __future__ import annotations

from tly.api.v1 import endpoints
from tly.api.v1.base import Resource
from tly.schemas.dto.requests.pixel import PixelCreateRequest, PixelUpdateRequest
from tly.schemas.dto.responses.pixel import Pixel


class PixelsResource(Resource):
    """Tracking pixel CRUD."""

    def create(self, request: PixelCreateRequest) -> Pixel:
        return self._call(endpoints.CREATE_PIXEL, payload=request)

    def list(self) -> list[Pixel]:
        return self._call(endpoints.LIST_PIXELS)

    def get(self, pixel_id: int) -> Pixel:
        return self._call(endpoints.GET_PIXEL, path_params={"id": pixel_id})

    def update(self, request: PixelUpdateRequest) -> Pixel:
        return self._call(
            endpoints.UPDATE_PIXEL, path_params={"id": request.id}, payload=request
        )

    def delete(self, pixel_id: int) -> None:
        self._call(endpoints.DELETE_PIXEL, path_params={"id": pixel_id})
