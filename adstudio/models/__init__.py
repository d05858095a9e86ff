"""Data models."""

from .asset import AdCopy, AdResult, ImageAsset
from .directions import CREATIVE_DIRECTIONS, CreativeDirection, get_direction, get_directions
from .request import AdRequest

__all__ = [
    "AdCopy",
    "AdRequest",
    "AdResult",
    "CREATIVE_DIRECTIONS",
    "CreativeDirection",
    "ImageAsset",
    "get_direction",
    "get_directions",
]
