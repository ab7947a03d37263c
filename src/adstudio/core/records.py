"""Internal records passed between the generation stages.

Each stage of a generation call has its own explicit record:

- :class:`Variant` — one prompt/aspect/style combination from the prompt
  builder.
- :class:`StoredBasePrompt` — what the prompt store keeps per variant id.
- :class:`TaskDescriptor` — one Runware ``imageInference`` task, serialised
  with Runware's field names.
- :class:`RemoteResult` — one per-task result parsed from the Runware
  response.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from adstudio.core.aspects import Aspect
from adstudio.core.models import AdInput


@dataclass(frozen=True)
class Variant:
    """One of the five prompt variants built for a batch."""

    id: str
    prompt: str
    aspect: Aspect
    model: str
    style: str


@dataclass(frozen=True)
class StoredBasePrompt:
    """The base prompt kept for later regeneration."""

    base_prompt: str
    original_input: AdInput
    model: str
    style: str


class TaskDescriptor(BaseModel):
    """One Runware image-inference task.

    Serialise with ``model_dump(by_alias=True)`` to get the wire payload.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    task_type: str = Field(default="imageInference", alias="taskType")
    task_uuid: str = Field(..., alias="taskUUID")
    positive_prompt: str = Field(..., alias="positivePrompt")
    negative_prompt: str = Field(..., alias="negativePrompt")
    height: int
    width: int
    model: str
    steps: int
    cfg_scale: float = Field(..., alias="CFGScale")
    number_results: int = Field(default=1, alias="numberResults")


class RemoteResult(BaseModel):
    """One per-task result from the Runware response.

    Only ``imageURL`` is required.  Runware adds fields over time
    (``imageUUID``, ``taskType`` and so on) which are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    image_url: str = Field(..., alias="imageURL")
    seed: int | None = None
    cost: float | None = None
    task_uuid: str | None = Field(default=None, alias="taskUUID")
