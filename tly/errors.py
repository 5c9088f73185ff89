"""
Client error hierarchy.

TlyError is the base for every error raised by this library. Transport
failures are not wrapped: httpx exceptions reach the caller unchanged.

Remote failures are deliberately flat. A non-2xx response becomes one ApiError
carrying the status code and the raw body text; the body is never parsed.
"""

from __future__ import annotations

from typing import Any, Optional


class TlyError(Exception):
    """Base library error. All typed errors inherit from this."""

    error_code: str = "tly_error"

    def __init__(self, message: str, *, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        payload: dict = {"error": self.message, "code": self.error_code}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class ConfigurationError(TlyError):
    error_code = "configuration_error"


class SerializationError(TlyError):
    """A request payload could not be encoded as JSON."""

    error_code = "serialization_error"


class ApiError(TlyError):
    """The service answered with a status outside [200, 300)."""

    error_code = "api_error"

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"API error: {body}")
        self.status_code = status_code
        self.body = body

    def to_dict(self) -> dict:
        payload = super().to_dict()
        payload["status_code"] = self.status_code
        return payload


class DecodeError(TlyError):
    """A successful response body did not match the expected result shape."""

    error_code = "decode_error"

    def __init__(self, message: str, *, body: str) -> None:
        super().__init__(message)
        self.body = body
