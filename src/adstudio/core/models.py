"""Pydantic request and response models for the Ad Studio API.

These models define the JSON schema for every API endpoint.  FastAPI uses
them for automatic request validation, serialisation, and OpenAPI
documentation generation.  They live in ``core`` because the generation
stages consume them directly; :mod:`adstudio.api.models` re-exports them.

The browser client speaks camelCase (``companyUrl``, ``basePromptId``), so
every model uses a camelCase alias generator.  Snake_case field names are
accepted as well, which keeps Python call sites readable.

Models
------
AdInput
    Payload for ``POST /api/images/generate-batch`` — the business-ad
    parameters collected by the form.
TweakInput
    Payload for ``POST /api/images/regenerate`` — which stored base prompt to
    start from, the target aspect and an optional free-text tweak.
GeneratedImage
    One shaped image result, returned by both generation endpoints.
ModelDescriptor
    One entry of ``GET /api/images/models``.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    TypeAdapter,
    ValidationError,
)
from pydantic.alias_generators import to_camel

from adstudio.core.aspects import Aspect

_HTTP_URL = TypeAdapter(HttpUrl)


def _check_http_url(value: str) -> str:
    """Validate *value* as an http(s) URL but keep the submitted text.

    The brand shown in prompts is cut from this text, so it must not be
    normalised (lower-cased host, punycode, trailing slash).
    """
    try:
        _HTTP_URL.validate_python(value)
    except ValidationError as e:
        raise ValueError(f"Invalid URL: {value!r}") from e
    return value


CompanyUrl = Annotated[str, AfterValidator(_check_http_url)]


class _WireModel(BaseModel):
    """Base model using camelCase aliases on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AdInput(_WireModel):
    """Request body for the ``POST /api/images/generate-batch`` endpoint.

    Immutable once submitted; the original instance is kept alongside every
    stored base prompt.

    Attributes:
        company_url: Company website, kept exactly as submitted.  The brand
            name is cut from it.
        product_name: Optional product name appended to the brand.
        business_value: One-line value proposition.
        audience: Comma-separated audience list (only the first three entries
            are used in prompts).
        body_text: Ad body copy.
        footer_text: Call-to-action text.
        render_cta_on_image: Whether the prompt asks for a CTA text area.
    """

    model_config = ConfigDict(frozen=True)

    company_url: CompanyUrl = Field(
        ...,
        description="Company website URL (e.g. 'https://acme.io').",
    )
    product_name: str = Field(
        default="",
        description="Optional product name.",
    )
    business_value: str = Field(
        ...,
        min_length=3,
        description="Business value statement.",
    )
    audience: str = Field(
        ...,
        min_length=3,
        description="Comma-separated target audience (e.g. 'CEO, CTO').",
    )
    body_text: str = Field(
        ...,
        min_length=3,
        description="Ad body text.",
    )
    footer_text: str = Field(
        ...,
        min_length=2,
        description="Footer / call-to-action text.",
    )
    render_cta_on_image: bool = Field(
        default=False,
        description="Ask the model to leave room for the CTA on the image.",
    )


class TweakInput(_WireModel):
    """Request body for the ``POST /api/images/regenerate`` endpoint.

    Attributes:
        image_id: Identifier of the image being replaced (informational).
        base_prompt_id: Variant id returned as ``basePromptId`` by a batch
            call.  Must exist in the prompt store.
        aspect: Aspect for the regenerated image.
        tweak_text: Free-text tweak.  Empty means "same prompt, new sample".
    """

    image_id: str = Field(
        ...,
        description="Identifier of the image being regenerated.",
    )
    base_prompt_id: str = Field(
        ...,
        description="Stored base prompt to start from.",
    )
    aspect: Aspect = Field(
        ...,
        description="Target aspect ratio.",
    )
    tweak_text: str = Field(
        default="",
        description="Optional free-text tweak.",
    )


class ImageMeta(_WireModel):
    """Generation metadata echoed back with every image."""

    model: str
    steps: int
    cfg: float
    width: int
    height: int
    positive_prompt: str


class GeneratedImage(_WireModel):
    """One generated image as returned to the browser client.

    ``base_prompt_id`` and ``style`` are only set on images produced by a
    batch call; a regenerated image carries neither.
    """

    id: str
    url: str
    aspect: Aspect
    seed: int | None = None
    cost: float | None = None
    meta: ImageMeta
    base_prompt_id: str | None = None
    style: str | None = None


class ModelDescriptor(_WireModel):
    """A curated model offered to the client."""

    id: str
    name: str
    description: str
