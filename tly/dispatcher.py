"""
Authenticated request dispatcher.

Every resource operation funnels through RequestDispatcher.dispatch(): one
request, one response, no retries. Non-2xx responses become ApiError carrying
the raw body; 2xx bodies are decoded with a pydantic TypeAdapter for the
caller's result type.
"""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from tly.config import DEFAULT_BASE_URL
from tly.errors import ApiError, DecodeError, SerializationError
from tly.infrastructure.http_client import HttpClient
from tly.schemas.base import RequestModel
from tly.shared.logging import get_logger

log = get_logger(__name__)

JSON_CONTENT_TYPE = "application/json"


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def encode_payload(payload: Any) -> bytes:
    """Serialize a request payload to JSON bytes.

    Request models emit only the fields the caller set; anything else goes
    through ``json.dumps``.
    """
    try:
        if isinstance(payload, RequestModel):
            return payload.to_json().encode()
        return json.dumps(payload).encode()
    except (TypeError, ValueError) as exc:
        raise SerializationError(
            f"could not serialize {type(payload).__name__} payload: {exc}"
        ) from exc


def decode_result(result_type: Any, body: bytes) -> Any:
    try:
        return _adapter(result_type).validate_json(body)
    except ValidationError as exc:
        text = body.decode("utf-8", errors="replace")
        raise DecodeError(
            f"could not decode response into {_type_name(result_type)}: {exc}",
            body=text,
        ) from exc


def _type_name(result_type: Any) -> str:
    return getattr(result_type, "__name__", None) or str(result_type)


def _read_error_body(response: httpx.Response) -> str:
    # A body that cannot be read degrades to "" rather than masking the status
    try:
        response.read()
        return response.text
    except httpx.HTTPError:
        return ""


class RequestDispatcher:
    """Credential context plus the single request/response routine.

    The base URL, token and transport handle are fixed at construction, so one
    dispatcher can be shared by concurrent callers.
    """

    def __init__(
        self,
        api_key: str,
        http_client: HttpClient,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        self._api_key = api_key
        self._http = http_client
        self._base_url = base_url.rstrip("/")

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def http_client(self) -> HttpClient:
        return self._http

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": JSON_CONTENT_TYPE,
            "Accept": JSON_CONTENT_TYPE,
        }

    def dispatch(
        self,
        method: str,
        path: str,
        query: str = "",
        payload: Any = None,
        result: Optional[Any] = None,
    ) -> Any:
        """Perform one request and return the decoded result.

        Args:
            method: HTTP verb.
            path: Fully expanded path, e.g. ``/api/v1/link/tag/5``.
            query: Pre-joined query string, used verbatim.
            payload: Request body; ``None`` sends an empty body.
            result: Type to decode a 2xx body into; ``None`` discards the body.

        Raises:
            SerializationError: the payload could not be encoded.
            ApiError: the response status was outside [200, 300).
            DecodeError: the 2xx body did not match ``result``.
            httpx.HTTPError: the transport failed.
        """
        url = self._base_url + path
        if query:
            url += "?" + query

        content = encode_payload(payload) if payload is not None else None
        request = self._http.build_request(
            method, url, content=content, headers=self._headers()
        )

        response = self._http.send(request, stream=True)
        try:
            log.debug(
                "tly_request_completed",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            if not 200 <= response.status_code < 300:
                raise ApiError(response.status_code, _read_error_body(response))
            if result is None:
                return None
            return decode_result(result, response.read())
        finally:
            response.close()
