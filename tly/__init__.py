"""Python client for the T.LY URL shortener API."""

from tly.client import TlyClient
from tly.config import DEFAULT_BASE_URL, ClientSettings, LoggingSettings
from tly.dispatcher import RequestDispatcher
from tly.errors import (
    ApiError,
    ConfigurationError,
    DecodeError,
    SerializationError,
    TlyError,
)
from tly.infrastructure.http_client import HttpClient
from tly.schemas.dto.requests.link import (
    BulkShortenRequest,
    ExpandRequest,
    ShortLinkCreateRequest,
    ShortLinkDeleteRequest,
    ShortLinkUpdateRequest,
)
from tly.schemas.dto.requests.pixel import PixelCreateRequest, PixelUpdateRequest
from tly.schemas.dto.requests.tag import TagRequest
from tly.schemas.dto.responses.link import ExpandedLink, RawText, ShortLink
from tly.schemas.dto.responses.pixel import Pixel
from tly.schemas.dto.responses.stats import LinkStats
from tly.schemas.dto.responses.tag import Tag
from tly.shared.logging import setup_logging

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_BASE_URL",
    "ApiError",
    "BulkShortenRequest",
    "ClientSettings",
    "ConfigurationError",
    "DecodeError",
    "ExpandRequest",
    "ExpandedLink",
    "HttpClient",
    "LinkStats",
    "LoggingSettings",
    "Pixel",
    "PixelCreateRequest",
    "PixelUpdateRequest",
    "RawText",
    "RequestDispatcher",
    "SerializationError",
    "ShortLink",
    "ShortLinkCreateRequest",
    "ShortLinkDeleteRequest",
    "ShortLinkUpdateRequest",
    "Tag",
    "TagRequest",
    "TlyClient",
    "TlyError",
    "setup_logging",
]
