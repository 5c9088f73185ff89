"""
Base models for request payloads and response records.

RequestModel tracks which fields the caller actually assigned. to_payload()
and to_json() emit only those, so an optional field has three wire states:
never assigned (omitted), assigned None (sent as null, which the service reads
as "clear"), assigned a value (sent as is).

ResponseModel ignores fields the service adds that this client does not model,
and reads a null in a non-nullable field as that field's default (or the zero
value of its type when the field has no default).
"""

from __future__ import annotations

from typing import Any, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.fields import FieldInfo

_ZERO_VALUES: dict[Any, Any] = {str: "", int: 0, float: 0.0, bool: False}


def _accepts_none(field: FieldInfo) -> bool:
    annotation = field.annotation
    if annotation is Any or annotation is None:
        return True
    return get_origin(annotation) is Union and type(None) in get_args(annotation)


class RequestModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-compatible dict sent as the request body."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_unset=True)


class ResponseModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _null_as_default(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        cleaned = dict(data)
        for name, field in cls.model_fields.items():
            key = field.alias or name
            if key not in cleaned or cleaned[key] is not None or _accepts_none(field):
                continue
            if not field.is_required():
                del cleaned[key]
            elif field.annotation in _ZERO_VALUES:
                cleaned[key] = _ZERO_VALUES[field.annotation]
        return cleaned
