"""Asset I/O - decode files or URLs into assets, write assets to disk."""

import mimetypes
from io import BytesIO
from pathlib import Path

import requests
from PIL import Image, UnidentifiedImageError

from .errors import InvalidRequestError
from .models import ImageAsset


USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


def detect_mime_type(raw: bytes, filename: str = "") -> str:
    """MIME type of image bytes, via Pillow with a filename fallback."""
    try:
        with Image.open(BytesIO(raw)) as img:
            mime = Image.MIME.get(img.format or "")
    except UnidentifiedImageError:
        mime = None

    if not mime:
        mime, _ = mimetypes.guess_type(filename)
    if not mime or not mime.startswith("image/"):
        raise InvalidRequestError(f"Not a supported image: {filename or '<bytes>'}")
    return mime


def load_asset(path: str | Path) -> ImageAsset:
    """Read an image file into an asset."""
    path = Path(path).expanduser()
    if not path.is_file():
        raise InvalidRequestError(f"Image file not found: {path}")
    raw = path.read_bytes()
    return ImageAsset.from_bytes(raw, detect_mime_type(raw, path.name))


def download_asset(url: str, timeout: int = 30) -> ImageAsset:
    """Download an image from a URL into an asset."""
    try:
        response = requests.get(url, headers={"User-Agent": USER_AGENT}, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise RuntimeError(f"Failed to download image from {url}: {e}") from e

    header_type = response.headers.get("Content-Type", "").split(";")[0].strip()
    try:
        mime = detect_mime_type(response.content, url)
    except InvalidRequestError:
        if not header_type.startswith("image/"):
            raise
        mime = header_type
    return ImageAsset.from_bytes(response.content, mime)


def save_asset(asset: ImageAsset, path: str | Path) -> Path:
    """Write an asset to ``path``, adding the matching extension if missing."""
    path = Path(path)
    if not path.suffix:
        path = path.with_suffix(f".{asset.extension}")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(asset.to_bytes())
    return path
