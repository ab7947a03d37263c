"""Pydantic request and response models for the Ad Studio API.

The models are defined in :mod:`adstudio.core.models`, next to the
generation stages that consume them, and re-exported here for the route
handlers.
"""

from adstudio.core.models import (
    AdInput,
    GeneratedImage,
    ImageMeta,
    ModelDescriptor,
    TweakInput,
)

__all__ = [
    "AdInput",
    "GeneratedImage",
    "ImageMeta",
    "ModelDescriptor",
    "TweakInput",
]
