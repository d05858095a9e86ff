"""adstudio - AI image ad generation with regeneration and edit history."""

from .engine import AdStudio
from .errors import ErrorCategory, GenerationError, InvalidRequestError
from .models import AdCopy, AdRequest, ImageAsset

__all__ = [
    "AdCopy",
    "AdRequest",
    "AdStudio",
    "ErrorCategory",
    "GenerationError",
    "ImageAsset",
    "InvalidRequestError",
]
