"""Image generation service.

:class:`ImageService` composes the prompt builder, prompt store, tweak
applicator, Runware client and response shaper into the three operations the
API exposes:

- :meth:`ImageService.generate_batch` — five images from one ad input.
- :meth:`ImageService.regenerate` — one image from a stored base prompt plus
  a tweak.
- :meth:`ImageService.list_models` — the curated model list.

Both generation calls are all-or-nothing.  Any upstream failure is logged
and re-raised as :class:`~adstudio.core.errors.GenerationError`; no partial
list of images is ever returned.
"""

from __future__ import annotations

import logging

from adstudio.core.errors import GenerationError, PromptNotFoundError, ResponseFormatError
from adstudio.core.models import AdInput, GeneratedImage, ModelDescriptor, TweakInput
from adstudio.core.prompt_builder import DEFAULT_MODEL, build_variants
from adstudio.core.prompt_store import PromptStore
from adstudio.core.runware_client import RunwareClient
from adstudio.core.shaping import shape_batch, shape_single
from adstudio.core.tweaks import apply_tweak

logger = logging.getLogger(__name__)

CURATED_MODELS: tuple[ModelDescriptor, ...] = (
    ModelDescriptor(
        id="runware:101@1",
        name="Realistic",
        description="High quality realistic images",
    ),
    ModelDescriptor(
        id="runware:100@1",
        name="Artistic",
        description="More artistic and stylized",
    ),
)


class ImageService:
    """Generate and regenerate ad images.

    Args:
        client: Runware client used for every outbound call.
        store: Prompt store shared by batch and regenerate calls.
        default_model: Model assigned to batch variants.
    """

    def __init__(
        self,
        client: RunwareClient,
        store: PromptStore,
        *,
        default_model: str = DEFAULT_MODEL,
    ):
        self.client = client
        self.store = store
        self.default_model = default_model

    async def generate_batch(self, ad_input: AdInput) -> list[GeneratedImage]:
        """Generate one image per prompt variant for *ad_input*.

        Raises:
            GenerationError: If the Runware call fails or its response cannot
                be shaped.
        """
        variants = build_variants(ad_input, self.store, model=self.default_model)
        tasks = [
            self.client.build_task(variant.prompt, variant.aspect, variant.model)
            for variant in variants
        ]
        try:
            results = await self.client.run_tasks(tasks)
            images = shape_batch(results, variants)
        except Exception as e:
            logger.error(f"Error generating batch images: {e}", exc_info=True)
            raise GenerationError(f"Failed to generate images: {e}") from e

        logger.info(f"Generated {len(images)} images for {ad_input.company_url}")
        return images

    async def regenerate(self, tweak: TweakInput) -> GeneratedImage:
        """Regenerate one image from a stored base prompt.

        The base prompt is looked up before anything is sent upstream, so an
        unknown id never costs a Runware call.

        Raises:
            PromptNotFoundError: If ``tweak.base_prompt_id`` is not stored.
            GenerationError: If the Runware call fails or returns nothing.
        """
        stored = self.store.get(tweak.base_prompt_id)
        prompt = apply_tweak(stored, tweak.tweak_text)
        task = self.client.build_task(prompt, tweak.aspect, stored.model)

        try:
            results = await self.client.run_tasks([task])
            if not results:
                raise ResponseFormatError("Runware returned no results")
            image = shape_single(
                results[0],
                aspect=tweak.aspect,
                model=stored.model,
                prompt=prompt,
            )
        except Exception as e:
            logger.error(f"Error regenerating image {tweak.image_id}: {e}", exc_info=True)
            raise GenerationError(f"Failed to regenerate image: {e}") from e

        logger.info(f"Regenerated image {tweak.image_id} from {tweak.base_prompt_id}")
        return image

    def list_models(self) -> list[ModelDescriptor]:
        """Return the curated model list."""
        return list(CURATED_MODELS)
