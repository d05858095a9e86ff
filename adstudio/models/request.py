"""Ad generation request - inputs shared by every ad in a batch."""

from dataclasses import dataclass, field

from ..config import ASPECT_RATIOS, DEFAULT_ASPECT_RATIO
from ..errors import InvalidRequestError
from .asset import AdCopy, ImageAsset


@dataclass(frozen=True)
class AdRequest:
    """Assets, copy and format for one batch of ads."""

    product: ImageAsset | None       # Product or lifestyle photo (ASSET 1)
    style: ImageAsset | None         # Brand style guide / ad template (ASSET 2)
    logo: ImageAsset | None          # Brand logo (ASSET 3)
    copy: AdCopy = field(default_factory=AdCopy)
    aspect_ratio: str = DEFAULT_ASPECT_RATIO
    skip_copy: bool = False

    @property
    def effective_copy(self) -> AdCopy:
        """Copy sent to the provider (empty when the user skipped copy)."""
        return AdCopy() if self.skip_copy else self.copy

    def validate(self) -> None:
        """Raise InvalidRequestError unless every required input is present."""
        missing = [
            name for name in ("product", "style", "logo")
            if getattr(self, name) is None
        ]
        if missing:
            raise InvalidRequestError(f"Missing required images: {', '.join(missing)}")
        if not self.skip_copy and not self.copy.is_complete:
            raise InvalidRequestError("Headline and description are required unless ad copy is skipped.")
        if self.aspect_ratio not in ASPECT_RATIOS:
            raise InvalidRequestError(
                f"Unsupported aspect ratio: {self.aspect_ratio}. Valid: {', '.join(ASPECT_RATIOS)}"
            )
