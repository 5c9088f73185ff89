from . import endpoints  # noqa: F401
from .links import LinksResource
from .pixels import PixelsResource
from .stats import StatsResource
from .tags import TagsResource

__all__ = [
    "LinksResource",
    "PixelsResource",
    "StatsResource",
    "TagsResource",
]
