"""Aspect ratios and fixed sampling defaults.

The three aspects match the placements a LinkedIn campaign needs: a wide
single-image ad, a square feed post, and a tall mobile card.  Both dimensions
of every aspect are multiples of 64 so that the diffusion backend accepts
them without resizing.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Aspect(str, Enum):
    """Enumerated image aspect ratio."""

    HORIZONTAL_191_1 = "HORIZONTAL_191_1"
    SQUARE_1_1 = "SQUARE_1_1"
    VERTICAL_4_5 = "VERTICAL_4_5"


@dataclass(frozen=True)
class AspectSpec:
    """Pixel dimensions for one aspect."""

    width: int
    height: int


ASPECT_SPECS: dict[Aspect, AspectSpec] = {
    Aspect.HORIZONTAL_191_1: AspectSpec(width=1216, height=640),  # ~1.9:1
    Aspect.SQUARE_1_1: AspectSpec(width=1088, height=1088),
    Aspect.VERTICAL_4_5: AspectSpec(width=896, height=1152),
}

# Sampling parameters sent with every task and echoed into image metadata.
DEFAULT_STEPS = 28
DEFAULT_CFG = 7.0


def aspect_spec(aspect: Aspect | str) -> AspectSpec:
    """Return the fixed pixel dimensions for *aspect*.

    Raises:
        ValueError: If *aspect* is not one of the enumerated values.
    """
    return ASPECT_SPECS[Aspect(aspect)]
