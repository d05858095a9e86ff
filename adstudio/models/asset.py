"""Image asset and ad copy models."""

import base64
import binascii
import re
from dataclasses import dataclass

from ..errors import InvalidRequestError


_DATA_URL_RE = re.compile(r"^data:(image/[^;]+);base64,(.+)$", re.DOTALL)


@dataclass(frozen=True)
class ImageAsset:
    """An image as base64 text plus its MIME type."""

    data: str
    mime_type: str

    @classmethod
    def from_bytes(cls, raw: bytes, mime_type: str) -> "ImageAsset":
        """Build an asset from raw image bytes."""
        return cls(data=base64.b64encode(raw).decode("ascii"), mime_type=mime_type)

    @classmethod
    def from_data_url(cls, data_url: str) -> "ImageAsset":
        """Parse a ``data:image/...;base64,...`` URL."""
        match = _DATA_URL_RE.match(data_url or "")
        if not match:
            raise InvalidRequestError("Invalid base image data URL format.")
        return cls(data=match.group(2), mime_type=match.group(1))

    def to_bytes(self) -> bytes:
        """Decode the base64 payload."""
        try:
            return base64.b64decode(self.data, validate=True)
        except (binascii.Error, ValueError) as e:
            raise InvalidRequestError(f"Asset data is not valid base64: {e}") from e

    @property
    def data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"

    @property
    def extension(self) -> str:
        """File extension matching the MIME type (``png`` when unknown)."""
        subtype = self.mime_type.split("/", 1)[-1].lower()
        return {"jpeg": "jpg", "svg+xml": "svg"}.get(subtype, subtype or "png")


@dataclass(frozen=True)
class AdCopy:
    """Headline, description and call to action for an ad."""

    headline: str = ""
    description: str = ""
    cta: str = ""

    @property
    def has_copy(self) -> bool:
        return self.headline.strip() != ""

    @property
    def is_complete(self) -> bool:
        """Headline and description are both present."""
        return bool(self.headline.strip() and self.description.strip())


# A generated ad is an image asset stored by batch index
AdResult = ImageAsset
