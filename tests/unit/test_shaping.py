"""Unit tests for response shaping."""

from __future__ import annotations

import pytest

from adstudio.core.aspects import ASPECT_SPECS, Aspect
from adstudio.core.errors import ResponseFormatError
from adstudio.core.prompt_builder import build_variants
from adstudio.core.records import RemoteResult
from adstudio.core.shaping import shape_batch, shape_single


def _results(count: int) -> list[RemoteResult]:
    return [
        RemoteResult(image_url=f"https://img/{i}.jpg", seed=i, cost=0.002) for i in range(count)
    ]


class TestShapeBatch:
    """Tests for shape_batch."""

    def test_pairs_results_with_variants(self, ad_input):
        variants = build_variants(ad_input)

        images = shape_batch(_results(5), variants)

        for index, (image, variant) in enumerate(zip(images, variants)):
            assert image.url == f"https://img/{index}.jpg"
            assert image.seed == index
            assert image.aspect == variant.aspect
            assert image.base_prompt_id == variant.id
            assert image.style == variant.style
            assert image.meta.positive_prompt == variant.prompt
            assert image.meta.model == variant.model

    def test_dimensions_match_aspect(self, ad_input):
        for image in shape_batch(_results(5), build_variants(ad_input)):
            spec = ASPECT_SPECS[image.aspect]
            assert (image.meta.width, image.meta.height) == (spec.width, spec.height)

    def test_fixed_sampling_metadata(self, ad_input):
        for image in shape_batch(_results(5), build_variants(ad_input)):
            assert image.meta.steps == 28
            assert image.meta.cfg == 7.0

    def test_fresh_image_ids(self, ad_input):
        variants = build_variants(ad_input)
        images = shape_batch(_results(5), variants)

        ids = {image.id for image in images}
        assert len(ids) == 5
        assert ids.isdisjoint({v.id for v in variants})

    def test_count_mismatch_raises(self, ad_input):
        with pytest.raises(ResponseFormatError, match="Expected 5 results"):
            shape_batch(_results(4), build_variants(ad_input))


class TestShapeSingle:
    """Tests for shape_single."""

    @pytest.mark.parametrize("aspect", list(Aspect))
    def test_dimensions_for_every_aspect(self, aspect):
        image = shape_single(_results(1)[0], aspect=aspect, model="m", prompt="p")

        spec = ASPECT_SPECS[aspect]
        assert (image.meta.width, image.meta.height) == (spec.width, spec.height)

    def test_no_back_reference(self):
        image = shape_single(
            _results(1)[0], aspect=Aspect.SQUARE_1_1, model="runware:101@1", prompt="p"
        )

        assert image.base_prompt_id is None
        assert image.style is None
        assert image.meta.positive_prompt == "p"

    def test_serialises_camel_case(self):
        image = shape_single(_results(1)[0], aspect=Aspect.VERTICAL_4_5, model="m", prompt="p")

        data = image.model_dump(by_alias=True)

        assert data["aspect"] == "VERTICAL_4_5"
        assert data["meta"]["positivePrompt"] == "p"
        assert "basePromptId" in data
