"""Ad Studio - business ad image generation backed by the Runware API."""

__version__ = "0.1.0"

from adstudio.core.config import AdStudioConfig, config

__all__ = [
    "AdStudioConfig",
    "config",
]
