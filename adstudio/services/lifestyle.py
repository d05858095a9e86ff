"""Lifestyle image service - places a product photo into a scene."""

import logging

from ..clients.base import ImageProvider
from ..clients.gemini import image_part, text_part
from ..config import DEFAULT_ASPECT_RATIO
from ..errors import InvalidRequestError
from ..models import ImageAsset
from ..prompts import build_lifestyle_prompt
from .retry import with_retries

logger = logging.getLogger(__name__)


class LifestyleService:
    """Generate a lifestyle photo usable as ASSET 1 of an ad request."""

    def __init__(self, provider: ImageProvider):
        self.provider = provider

    async def generate(
        self,
        product: ImageAsset | None,
        prompt: str,
        reference: ImageAsset | None = None,
        aspect_ratio: str = DEFAULT_ASPECT_RATIO,
    ) -> ImageAsset:
        """
        Generate a lifestyle image.

        Two modes:
        - reference given: integrate the product into the reference photo
        - no reference: generate a new scene around the product

        Args:
            product: Product photo.
            prompt: Scene description or integration instructions.
            reference: Optional base photo to place the product into.
            aspect_ratio: Output aspect ratio.

        Returns:
            The generated lifestyle image.
        """
        if product is None or not prompt or not prompt.strip():
            raise InvalidRequestError("Please provide a product image and a prompt for the lifestyle image.")

        instructions = build_lifestyle_prompt(prompt, with_reference=reference is not None)
        if reference is not None:
            parts = [
                text_part("**Product Photo:**"),
                image_part(product),
                text_part("\n\n**Lifestyle Image Reference:**"),
                image_part(reference),
                text_part(f"\n\n**Instructions:**\n{instructions}"),
            ]
        else:
            parts = [image_part(product), text_part(instructions)]

        logger.info("Generating lifestyle image (reference=%s)", reference is not None)
        return await with_retries(
            lambda: self.provider.generate_image(parts, aspect_ratio=aspect_ratio),
            "lifestyle image generation",
        )
