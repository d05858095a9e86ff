"""Provider protocols consumed by the services."""

from typing import Protocol

from google.genai import types

from ..models import ImageAsset


class ImageProvider(Protocol):
    """Multimodal generation returning one image."""

    async def generate_image(
        self,
        parts: list[types.Part],
        aspect_ratio: str | None = None,
    ) -> ImageAsset:
        ...


class TextProvider(Protocol):
    """Text-only generation."""

    async def generate_text(self, prompt: str) -> str:
        ...
