"""Gemini client (Nano Banana Pro / Gemini 3 Pro Image) for ad images and copy."""

from google import genai
from google.genai import types

from ..config import GEMINI_API_KEY, IMAGE_MODEL, TEXT_MODEL
from ..errors import EmptyResultFailure, PolicyViolationFailure, to_provider_failure
from ..models import ImageAsset


_SAFETY_FINISH_REASONS = {"SAFETY", "IMAGE_SAFETY", "PROHIBITED_CONTENT"}


def text_part(text: str) -> types.Part:
    """Text part of a multimodal request."""
    return types.Part.from_text(text=text)


def image_part(asset: ImageAsset) -> types.Part:
    """Inline binary part of a multimodal request."""
    return types.Part.from_bytes(data=asset.to_bytes(), mime_type=asset.mime_type)


class GeminiClient:
    """Async client for Gemini image and text generation.

    Every failure leaves this class as a ``ProviderFailure`` variant, so callers
    never see raw SDK or transport exceptions.
    """

    def __init__(
        self,
        api_key: str,
        image_model: str = IMAGE_MODEL,
        text_model: str = TEXT_MODEL,
    ):
        self.client = genai.Client(api_key=api_key)
        self.image_model = image_model
        self.text_model = text_model

    @classmethod
    def from_env(cls) -> "GeminiClient":
        """Build a client from GEMINI_API_KEY (or API_KEY)."""
        if not GEMINI_API_KEY:
            raise ValueError("GEMINI_API_KEY environment variable is not set.")
        return cls(api_key=GEMINI_API_KEY)

    async def generate_image(
        self,
        parts: list[types.Part],
        aspect_ratio: str | None = None,
    ) -> ImageAsset:
        """
        Generate one image from an ordered list of text and image parts.

        Args:
            parts: Request parts, in order.
            aspect_ratio: Optional output aspect ratio (e.g. "16:9").

        Returns:
            The first inline image of the first candidate.
        """
        config = types.GenerateContentConfig(
            response_modalities=["IMAGE"],
            image_config=types.ImageConfig(aspect_ratio=aspect_ratio) if aspect_ratio else None,
        )
        response = await self._generate(
            self.image_model,
            types.Content(role="user", parts=parts),
            config,
        )
        return self._extract_image(response)

    async def generate_text(self, prompt: str) -> str:
        """Generate plain text from a prompt."""
        response = await self._generate(self.text_model, prompt)
        if not response.text:
            raise EmptyResultFailure("Model response did not contain any text.")
        return response.text

    async def _generate(
        self,
        model: str,
        contents: types.Content | str,
        config: types.GenerateContentConfig | None = None,
    ) -> types.GenerateContentResponse:
        try:
            return await self.client.aio.models.generate_content(
                model=model,
                contents=contents,
                config=config,
            )
        except Exception as e:
            raise to_provider_failure(e) from e

    @staticmethod
    def _extract_image(response: types.GenerateContentResponse) -> ImageAsset:
        """Return the first inline image part or raise a structured failure."""
        feedback = response.prompt_feedback
        if feedback is not None and feedback.block_reason:
            raise PolicyViolationFailure(f"Request blocked for safety: {feedback.block_reason}")

        if response.candidates:
            candidate = response.candidates[0]
            if candidate.content and candidate.content.parts:
                for part in candidate.content.parts:
                    if part.inline_data and part.inline_data.data:
                        return ImageAsset.from_bytes(
                            part.inline_data.data,
                            part.inline_data.mime_type or "image/png",
                        )

            reason = getattr(candidate.finish_reason, "name", candidate.finish_reason)
            if reason in _SAFETY_FINISH_REASONS:
                raise PolicyViolationFailure(f"Response blocked for safety: {reason}")

        raise EmptyResultFailure()
