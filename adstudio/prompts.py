"""Prompt templates for ad, edit, lifestyle and copy requests."""

from .models import AdCopy, CreativeDirection


ASSET_LABELS = (
    '**ASSET 1: "Product/Lifestyle Photo"**',
    '\n\n**ASSET 2: "Brand Style Guide/Ad Template"**',
    '\n\n**ASSET 3: "Brand Logo"**',
)


def _copy_lines(copy: AdCopy) -> str:
    if not copy.has_copy:
        return "  - Skipped. The user will add their own text later."
    lines = [
        f'  - Headline: "{copy.headline}"',
        f'  - Description: "{copy.description}"',
    ]
    if copy.cta.strip():
        lines.append(f'  - Call to Action (CTA): "{copy.cta}"')
    return "\n".join(lines)


def _text_rules(copy: AdCopy) -> str:
    if copy.has_copy:
        return (
            "- Render the provided ad copy using the typography of the Brand Style Guide (ASSET 2).\n"
            "- If a copy element is not listed above, do not invent one or leave a placeholder for it.\n"
            "- All text must be legible with high contrast against its background.\n"
            "- Use only the exact ad copy provided. Do not add, omit, or change any words."
        )
    return (
        "- **Create Natural Negative Space:** Ad copy is skipped. Leave clean, uncluttered areas "
        "where text can be added later, as an organic part of the design.\n"
        "- **NO PLACEHOLDERS (CRITICAL):** No empty boxes or shapes that look like text "
        "placeholders, and no text of your own. The ad must be a polished, text-free visual."
    )


def build_ad_prompt(copy: AdCopy, direction: CreativeDirection, aspect_ratio: str) -> str:
    """Art-director prompt for one ad of a batch."""
    return f"""
# ROLE & GOAL
You are an expert AI Art Director. Create one professional, high-quality digital image ad from the provided assets and instructions. The final ad should have an aspect ratio of {aspect_ratio}.

# ASSETS
- **ASSET 1: Product/Lifestyle Photo:** The main visual for the ad.
- **ASSET 2: Brand Style Guide/Ad Template:** A reference for style ONLY.
- **ASSET 3: Brand Logo:** The official brand logo.
- **Ad Copy:**
{_copy_lines(copy)}

# CREATIVE DIRECTION
For this specific ad, follow this direction: {direction.text}

# EXECUTION RULES
### 1. Style Guide (ASSET 2)
- Use only its style: color palette, typography, general layout and shapes.
- **DO NOT USE THE CONTENT (CRITICAL):** remove every logo, text, product and image of ASSET 2.

### 2. Image Integration (ASSET 1)
- A product photo on a simple background: isolate the product and place it in the new composition.
- A lifestyle photo: outpaint it seamlessly to fill the canvas, or isolate the key person with the product and build the ad around them with ASSET 2 graphics.
- **PRODUCT INTEGRITY (CRITICAL):** the product must not be altered in any way.

### 3. Logo Integration (ASSET 3)
- Place the logo unmodified: do not redraw, reinterpret or trace it.
- Put it in a standard location with high contrast, legible but not dominant (roughly 5-10% of the ad area).

### 4. Text Integration
{_text_rules(copy)}

# FINAL QUALITY CHECK
1.  No text, graphics or logos cover faces or the product.
2.  The ad is clean, sharp and high-resolution.
3.  No solid borders at the sides or top/bottom.
4.  Logo and product are exact, unaltered copies of the assets.
5.  The labels "ASSET 1", "ASSET 2", "ASSET 3" never appear on the image.
"""


def build_edit_prompt(instructions: str) -> str:
    """Minimal-change edit prompt for an existing ad."""
    return f"""
**Persona:** You are an expert AI Graphic Designer performing a precise edit on an existing image. You are not creating a new image from scratch.

**Task:** Modify the provided ad image *only* as described in the user's instructions.

**CRITICAL RULES:**
1.  **Minimal Change:** Change only what is explicitly requested. Preserve composition, quality and existing text unless told otherwise.
2.  **Literal Interpretation:** Do not add creative elements of your own.
3.  **Preserve Quality:** Keep the same resolution and quality as the input image.

**User Instructions:** "{instructions}"
"""


def build_lifestyle_prompt(scene: str, with_reference: bool) -> str:
    """Prompt placing the product into a new scene or a reference photo."""
    if with_reference:
        return f"""
**Persona:** You are an expert photo editor with mastery of photorealistic composition.

**Primary Objective:** Integrate the "Product Photo" into the "Lifestyle Image Reference" so the result looks like one authentic photograph.

**User Instructions:** "{scene}"

**Execution Plan:**
1.  Isolate the primary product of the Product Photo.
2.  Place it into the reference according to the instructions: replacing attire, held by the model, or placed in the scene.
3.  Match lighting, shadows, reflections and perspective. Keep the model's face, pose and environment.

**Critical Rules:**
- The reference is the canvas. Do not change face, pose or background unless required by the instructions.
- **PRODUCT INTEGRITY (CRITICAL):** do not alter the product's shape, color, design or labels.
- Do not render the labels "Product Photo" or "Lifestyle Image Reference" on the image.
"""
    return f"""
**Persona:** You are an expert photo editor and retoucher.

**Primary Objective:** Place the product from the provided image into a new, photorealistic lifestyle scene based on the user's prompt.

**User Prompt:** "{scene}"

**Execution Plan:**
1.  Isolate the primary product from its background.
2.  Generate a bright, professionally shot scene that follows the prompt.
3.  Composite the product with matching lighting, shadows and perspective; keep it the focal point.

**Critical Rule:** The product must remain completely unaltered.
"""


def build_copy_prompt(field: str, current: str, limit: int) -> str:
    """Copywriter prompt refining one ad copy field."""
    return (
        f"You are an expert ad copywriter. Refine the following ad {field} to be more concise and "
        f"engaging, while staying true to the original intent. The new {field} must be under {limit} "
        f"characters. Do not add any extra commentary, just return the refined text. "
        f'Original {field}: "{current}"'
    )
