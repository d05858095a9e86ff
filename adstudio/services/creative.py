"""Creative generation service - one ad per creative direction, in parallel."""

import asyncio
import logging

from google.genai import types

from ..clients.base import ImageProvider
from ..clients.gemini import image_part, text_part
from ..models import AdRequest, AdResult, CreativeDirection, get_direction, get_directions
from ..prompts import ASSET_LABELS, build_ad_prompt
from .retry import with_retries

logger = logging.getLogger(__name__)


def _discard_result(task: asyncio.Future) -> None:
    """Retrieve a sibling's outcome so a failed batch leaves no unretrieved exceptions."""
    if not task.cancelled():
        task.exception()


class CreativeService:
    """Turn an ad request into one ad per creative direction."""

    def __init__(self, provider: ImageProvider, directions: list[CreativeDirection] | None = None):
        self.provider = provider
        self.directions = directions if directions is not None else get_directions()

    def direction_at(self, index: int) -> CreativeDirection:
        """Direction used for batch slot ``index``."""
        return get_direction(index, self.directions)

    async def generate_one(self, request: AdRequest, direction: CreativeDirection) -> AdResult:
        """Generate a single ad for one direction (with retries)."""
        parts = self._build_parts(request, direction)
        return await with_retries(
            lambda: self.provider.generate_image(parts, aspect_ratio=request.aspect_ratio),
            f"ad generation with style '{direction.key}'",
        )

    async def generate_batch(self, request: AdRequest) -> list[AdResult]:
        """
        Generate one ad per direction, all started before any is awaited.

        The first failure fails the whole batch. Sibling calls are not
        cancelled; their results are discarded.

        Args:
            request: Shared assets, copy and aspect ratio.

        Returns:
            One result per direction, in direction order.
        """
        request.validate()
        logger.info("Generating %d ads (aspect ratio %s)", len(self.directions), request.aspect_ratio)

        tasks = [
            asyncio.ensure_future(self.generate_one(request, direction))
            for direction in self.directions
        ]
        for task in tasks:
            task.add_done_callback(_discard_result)
        try:
            results = await asyncio.gather(*tasks)
        except Exception:
            logger.exception("A critical error occurred during ad generation")
            raise

        logger.info("Generated %d ads", len(results))
        return list(results)

    def _build_parts(self, request: AdRequest, direction: CreativeDirection) -> list[types.Part]:
        """Labelled assets followed by the ad prompt."""
        request.validate()
        product_label, style_label, logo_label = ASSET_LABELS
        prompt = build_ad_prompt(request.effective_copy, direction, request.aspect_ratio)
        return [
            text_part(product_label),
            image_part(request.product),
            text_part(style_label),
            image_part(request.style),
            text_part(logo_label),
            image_part(request.logo),
            text_part(prompt),
        ]
