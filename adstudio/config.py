import os
from dotenv import load_dotenv

load_dotenv()

# API Keys and Config - loaded from .env
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")

# Gemini models
IMAGE_MODEL = os.getenv("ADSTUDIO_IMAGE_MODEL", "gemini-3-pro-image-preview")
TEXT_MODEL = os.getenv("ADSTUDIO_TEXT_MODEL", "gemini-2.5-flash")

# Attempts per provider call (no backoff between attempts)
MAX_RETRIES = 3

# Aspect ratios offered for ads, grouped for display
DEFAULT_ASPECT_RATIO = "1:1"
ASPECT_RATIO_GROUPS: dict[str, list[str]] = {
    "Landscape": ["21:9", "16:9", "4:3", "3:2", "5:4"],
    "Square": ["1:1"],
    "Portrait": ["9:16", "3:4", "2:3", "4:5"],
}
ASPECT_RATIOS: list[str] = [
    ratio for ratios in ASPECT_RATIO_GROUPS.values() for ratio in ratios
]

# Character limits for copy suggestions
COPY_LIMITS: dict[str, int] = {
    "headline": 35,
    "description": 200,
    "cta": 25,
}
