"""Five-variant prompt compilation for business ads.

A batch request is turned into five prompts that share one context sentence
and differ only in the scene they describe.  Each scene is bound to a fixed
aspect so that a single batch covers every LinkedIn placement.

Template Structure::

    Professional LinkedIn B2B advertisement for [brand][ product], targeting
    [audience]. Business value proposition: [value]. Corporate marketing
    style, clean business aesthetic, professional photography quality.
    [Scene description] [Optional CTA clause]

Brand Derivation
----------------
The brand is the part of the submitted company URL before its first dot,
once the scheme and a leading ``www.`` have been removed::

    https://www.acme.io/pricing  ->  acme

Audience
--------
Only the first three comma-separated audience entries are used; each entry
is stripped and the list is re-joined with ``", "``.

Usage
-----
::

    variants = build_variants(ad_input, store)
    for variant in variants:
        print(variant.style, variant.aspect, variant.prompt)
"""

from __future__ import annotations

import re
import uuid

from adstudio.core.aspects import Aspect
from adstudio.core.models import AdInput
from adstudio.core.prompt_store import PromptStore
from adstudio.core.records import StoredBasePrompt, Variant

DEFAULT_MODEL = "runware:101@1"

# ---------------------------------------------------------------------------
# Fixed scene templates, in output order.  Callers zip the built variants
# against remote results positionally, so this order must not change.
# ---------------------------------------------------------------------------

SCENE_TEMPLATES: tuple[tuple[str, Aspect, str], ...] = (
    (
        "Professional Office Scene",
        Aspect.HORIZONTAL_191_1,
        "Corporate office environment, professional business people in modern workspace, "
        "clean corporate photography, high-end business setting, professional lighting, "
        "corporate colors, space for headline text.",
    ),
    (
        "Business Dashboard",
        Aspect.HORIZONTAL_191_1,
        "Clean corporate dashboard or business analytics interface, professional data "
        "visualization, modern business technology, corporate blue and white color scheme, "
        "professional photography, space for marketing copy.",
    ),
    (
        "Business Meeting",
        Aspect.SQUARE_1_1,
        "Professional handshake or business meeting scene, corporate executives, modern "
        "conference room, professional photography, clean business aesthetic, corporate "
        "colors, space for headline.",
    ),
    (
        "Corporate Architecture",
        Aspect.SQUARE_1_1,
        "Modern corporate building exterior or office lobby, professional architecture "
        "photography, clean lines, corporate branding, professional lighting, business "
        "environment, space for text overlay.",
    ),
    (
        "Business Analytics",
        Aspect.VERTICAL_4_5,
        "Professional business charts and graphs, corporate data visualization, clean "
        "infographic style, business analytics, professional color scheme, corporate "
        "marketing materials, space for headline text.",
    ),
)


_URL_PREFIX = re.compile(r"^(https?://)?(www\.)?")


def derive_brand(company_url: str) -> str:
    """Return the brand token for a company URL.

    The token is cut from the URL text as submitted, so its case and any
    non-ASCII characters are kept.

    Args:
        company_url: Absolute or scheme-less URL.

    Returns:
        The text before the first dot, once the scheme and ``www.`` are
        removed.
    """
    return _URL_PREFIX.sub("", company_url, count=1).split(".")[0]


def format_audience(audience: str, limit: int = 3) -> str:
    """Return the first *limit* comma-separated audience entries."""
    entries = [entry.strip() for entry in audience.split(",")]
    return ", ".join(entries[:limit])


def build_context(ad_input: AdInput) -> str:
    """Build the context sentence shared by all five variants."""
    brand = derive_brand(ad_input.company_url)
    product = f" {ad_input.product_name}" if ad_input.product_name else ""
    audience = format_audience(ad_input.audience)
    return (
        f"Professional LinkedIn B2B advertisement for {brand}{product}, "
        f"targeting {audience}. Business value proposition: {ad_input.business_value}. "
        "Corporate marketing style, clean business aesthetic, professional photography quality."
    )


def build_variants(
    ad_input: AdInput,
    store: PromptStore | None = None,
    *,
    model: str = DEFAULT_MODEL,
) -> list[Variant]:
    """Build the five prompt variants for *ad_input*.

    Each variant gets a fresh UUID.  When *store* is given, every variant's
    prompt is stored under that id so it can be regenerated later.

    Args:
        ad_input: Validated ad parameters.
        store: Prompt store that receives the base prompts.
        model: Model identifier assigned to every variant.

    Returns:
        Five variants, in the fixed template order.
    """
    context = build_context(ad_input)
    cta = (
        f' Include subtle CTA text area: "{ad_input.footer_text}"'
        if ad_input.render_cta_on_image
        else ""
    )

    variants = [
        Variant(
            id=str(uuid.uuid4()),
            prompt=f"{context} {scene}{cta}",
            aspect=aspect,
            model=model,
            style=style,
        )
        for style, aspect, scene in SCENE_TEMPLATES
    ]

    if store is not None:
        for variant in variants:
            store.put(
                variant.id,
                StoredBasePrompt(
                    base_prompt=variant.prompt,
                    original_input=ad_input,
                    model=variant.model,
                    style=variant.style,
                ),
            )

    return variants
