"""Copy suggestion service - refines one ad copy field."""

from ..clients.base import TextProvider
from ..config import COPY_LIMITS
from ..errors import InvalidRequestError
from ..prompts import build_copy_prompt
from .retry import with_retries


class CopyService:
    """Refine headline, description or CTA text."""

    def __init__(self, provider: TextProvider):
        self.provider = provider

    async def suggest(self, field: str, current: str) -> str:
        """Return a refined version of ``current`` under the field's character limit."""
        if field not in COPY_LIMITS:
            raise InvalidRequestError(f"Unknown copy field: {field}. Valid: {', '.join(COPY_LIMITS)}")
        if not current or not current.strip():
            raise InvalidRequestError(f"Nothing to refine: {field} is empty.")

        prompt = build_copy_prompt(field, current, COPY_LIMITS[field])
        text = await with_retries(
            lambda: self.provider.generate_text(prompt),
            f"copy suggestion for {field}",
        )
        return text.strip().replace('"', "")
