"""Keyword-driven prompt tweaks for regeneration.

A tweak is free text typed by the user on the results page.  Known phrases
in it ("corporate colors", "minimalist", ...) expand into a fixed sentence
each, and the raw tweak text is appended after them so nothing the user
wrote is lost.
"""

from __future__ import annotations

from adstudio.core.records import StoredBasePrompt

# Keyword phrase -> sentence appended when the phrase occurs in the tweak.
# Matches are applied in this order.
TWEAK_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("corporate colors", " Corporate blue and white color scheme, professional branding."),
    ("professional lighting", " Professional studio lighting, clean and bright."),
    ("clean background", " Clean, uncluttered background, minimal distractions."),
    ("business setting", " Professional business environment, corporate setting."),
    ("modern office", " Modern office space, contemporary business interior."),
    (
        "executive style",
        " Executive-level professional appearance, high-end business aesthetic.",
    ),
    ("minimalist", " Minimalist clean design, lots of white space, simple composition."),
    ("brand colors", " Emphasize brand colors and corporate identity."),
)


def apply_tweak(stored: StoredBasePrompt, tweak_text: str) -> str:
    """Return the base prompt of *stored* with *tweak_text* applied.

    Args:
        stored: The stored base prompt record.  It is not modified.
        tweak_text: Free-text tweak.  Empty or whitespace-only text leaves
            the base prompt unchanged.

    Returns:
        The tweaked prompt string.
    """
    prompt = stored.base_prompt
    if not tweak_text.strip():
        return prompt

    lowered = tweak_text.lower()
    for keyword, sentence in TWEAK_KEYWORDS:
        if keyword in lowered:
            prompt += sentence

    return f"{prompt} {tweak_text}"
