"""API clients for external services."""

from .base import ImageProvider, TextProvider
from .gemini import GeminiClient, image_part, text_part

__all__ = ["GeminiClient", "ImageProvider", "TextProvider", "image_part", "text_part"]
