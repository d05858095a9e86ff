"""Creative directions for an ad batch."""

from dataclasses import dataclass

from ..errors import InvalidRequestError


@dataclass(frozen=True)
class CreativeDirection:
    """One style variant of a batch. Batch index i always uses direction i."""

    key: str
    text: str


# 3 directions, in batch order
CREATIVE_DIRECTIONS: list[CreativeDirection] = [
    CreativeDirection(
        "image_centric",
        "**Image-Centric Focus:** The Product/Lifestyle Photo is the hero. Build a clean, "
        "minimalist layout where the image dominates, extending a lifestyle shot to a "
        "full-bleed canvas where needed. Text and logo are placed subtly to support the "
        "image. The result should feel premium and uncluttered.",
    ),
    CreativeDirection(
        "bold_typography",
        "**Bold Typographic Focus:** Build a dynamic, asymmetrical layout where typography "
        "is an artistic element balanced against the Product/Lifestyle Photo (ASSET 1). "
        "Use color blocks from the brand palette as accents that separate text and image "
        "areas and set a clear hierarchy. The result should feel energetic and deliberate.",
    ),
    CreativeDirection(
        "template_adaptation",
        "**High-Fidelity Template Adaptation:** Recreate the \"Brand Style Guide/Ad "
        "Template\" (ASSET 2) with the new assets.\n"
        "    1.  Analyze the template layout: position, scale and alignment of image areas, "
        "text area and logo.\n"
        "    2.  **CRITICAL** Mirror that structure and style using only ASSET 1, ASSET 3 "
        "and the provided Ad Copy. REMOVE every original text, logo or image of ASSET 2.\n"
        "    3.  The ad must still fit the brand's established design system.",
    ),
]


def get_directions() -> list[CreativeDirection]:
    """Get all creative directions in batch order."""
    return CREATIVE_DIRECTIONS


def get_direction(index: int, directions: list[CreativeDirection] | None = None) -> CreativeDirection:
    """Get direction by batch index (no cycling: index must be in range)."""
    if directions is None:
        directions = CREATIVE_DIRECTIONS
    if not 0 <= index < len(directions):
        raise InvalidRequestError(
            f"Invalid creative direction index: {index}. Valid: 0-{len(directions) - 1}"
        )
    return directions[index]
