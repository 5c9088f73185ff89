from __future__ import annotations

from tly.api.v1 import endpoints
from tly.api.v1.base import Resource
from tly.schemas.dto.requests.tag import TagRequest
from tly.schemas.dto.responses.tag import Tag


class TagsResource(Resource):
    def list(self) -> list[Tag]:
        return self._call(endpoints.LIST_TAGS)

    def create(self, tag: str) -> Tag:
        return self._call(endpoints.CREATE_TAG, payload=TagRequest(tag=tag))

    def get(self, tag_id: int) -> Tag:
        return self._call(endpoints.GET_TAG, path_params={"id": tag_id})

    def update(self, tag_id: int, tag: str) -> Tag:
        return self._call(
            endpoints.UPDATE_TAG, path_params={"id": tag_id}, payload=TagRequest(tag=tag)
        )

    def delete(self, tag_id: int) -> None:
        self._call(endpoints.DELETE_TAG, path_params={"id": tag_id})
