"""Edit service - applies one prompt-driven edit to an existing ad."""

from ..clients.base import ImageProvider
from ..clients.gemini import image_part, text_part
from ..errors import InvalidRequestError
from ..models import AdResult, ImageAsset
from ..prompts import build_edit_prompt
from .retry import with_retries


class EditService:
    """Prompt-driven edits of generated ads."""

    def __init__(self, provider: ImageProvider):
        self.provider = provider

    async def edit(self, base: AdResult, prompt: str) -> AdResult:
        """
        Apply one edit to ``base``.

        Args:
            base: The image to edit.
            prompt: User instructions (must not be blank).

        Returns:
            The edited image.
        """
        if not prompt or not prompt.strip():
            raise InvalidRequestError("Edit prompt must not be empty.")

        parts = [image_part(base), text_part(build_edit_prompt(prompt))]
        return await with_retries(
            lambda: self.provider.generate_image(parts),
            f'ad editing with prompt: "{prompt}"',
        )

    async def edit_data_url(self, data_url: str, prompt: str) -> str:
        """Edit an image given as a data URL and return a data URL."""
        base = ImageAsset.from_data_url(data_url)
        edited = await self.edit(base, prompt)
        return edited.data_url
