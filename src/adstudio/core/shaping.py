"""Shape raw Runware results into :class:`GeneratedImage` records."""

from __future__ import annotations

import uuid
from collections.abc import Sequence

from adstudio.core.aspects import DEFAULT_CFG, DEFAULT_STEPS, Aspect, aspect_spec
from adstudio.core.errors import ResponseFormatError
from adstudio.core.models import GeneratedImage, ImageMeta
from adstudio.core.records import RemoteResult, Variant


def _shape(
    result: RemoteResult,
    *,
    aspect: Aspect,
    model: str,
    prompt: str,
    base_prompt_id: str | None = None,
    style: str | None = None,
) -> GeneratedImage:
    spec = aspect_spec(aspect)
    return GeneratedImage(
        id=str(uuid.uuid4()),
        url=result.image_url,
        aspect=aspect,
        seed=result.seed,
        cost=result.cost,
        meta=ImageMeta(
            model=model,
            steps=DEFAULT_STEPS,
            cfg=DEFAULT_CFG,
            width=spec.width,
            height=spec.height,
            positive_prompt=prompt,
        ),
        base_prompt_id=base_prompt_id,
        style=style,
    )


def shape_batch(
    results: Sequence[RemoteResult],
    variants: Sequence[Variant],
) -> list[GeneratedImage]:
    """Pair batch results with their variants, by position.

    Every image keeps its variant id as ``base_prompt_id`` so the client can
    ask for a regeneration later.

    Raises:
        ResponseFormatError: If the number of results differs from the
            number of variants.
    """
    if len(results) != len(variants):
        raise ResponseFormatError(
            f"Expected {len(variants)} results from Runware, got {len(results)}"
        )
    return [
        _shape(
            result,
            aspect=variant.aspect,
            model=variant.model,
            prompt=variant.prompt,
            base_prompt_id=variant.id,
            style=variant.style,
        )
        for result, variant in zip(results, variants)
    ]


def shape_single(
    result: RemoteResult,
    *,
    aspect: Aspect,
    model: str,
    prompt: str,
) -> GeneratedImage:
    """Shape the result of a regenerate call.

    The image carries no ``base_prompt_id``: further tweaks start again from
    the original batch variant.
    """
    return _shape(result, aspect=aspect, model=model, prompt=prompt)
