"""HTTP client for the Runware image-generation API.

This module provides :class:`RunwareClient`, the only component that talks
to the network.  It builds ``imageInference`` task descriptors and sends a
list of them to Runware in one ``POST``; Runware runs the tasks and answers
with one result per task.

Response Shapes
---------------
Runware has answered in two shapes over time, and both are accepted::

    [{"imageURL": "...", "seed": 1, "cost": 0.002}, ...]
    {"data": [{"imageURL": "...", "seed": 1, "cost": 0.002}, ...]}

Anything else raises :class:`~adstudio.core.errors.ResponseFormatError`.
Results that echo their ``taskUUID`` are put back in task order; otherwise
they keep the order Runware sent them in.

Usage
-----
::

    client = RunwareClient(api_key="rw-...", timeout=60)
    task = client.build_task("A modern office", Aspect.SQUARE_1_1)
    results = await client.run_tasks([task])
    await client.aclose()
"""

from __future__ import annotations

import json
import logging
import uuid
from collections.abc import Sequence

import httpx
from pydantic import ValidationError

from adstudio.core.aspects import DEFAULT_CFG, DEFAULT_STEPS, Aspect, aspect_spec
from adstudio.core.config import AdStudioConfig
from adstudio.core.errors import RemoteError, ResponseFormatError
from adstudio.core.prompt_builder import DEFAULT_MODEL
from adstudio.core.records import RemoteResult, TaskDescriptor

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.runware.ai/v1/tasks"

NEGATIVE_PROMPT = (
    "anime, cartoon, illustration, artistic, fantasy, gaming, casual, informal, "
    "low quality, blurry, distorted, watermark, text overlay, busy background"
)


class RunwareClient:
    """Async client for the Runware tasks endpoint.

    Args:
        api_key: Bearer credential sent with every request.
        api_url: Tasks endpoint URL.
        timeout: Timeout in seconds for one call (connect, read and write).
        default_model: Model used by :meth:`build_task` when none is given.
        transport: Optional ``httpx`` transport, used by tests to answer
            requests without touching the network.
    """

    def __init__(
        self,
        api_key: str,
        *,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 120.0,
        default_model: str = DEFAULT_MODEL,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_url = api_url
        self.default_model = default_model
        self._http = httpx.AsyncClient(
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {api_key}",
            },
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    @classmethod
    def from_config(
        cls,
        cfg: AdStudioConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> RunwareClient:
        """Create a client from an :class:`AdStudioConfig`."""
        return cls(
            cfg.runware_api_key,
            api_url=cfg.runware_api_url,
            timeout=cfg.request_timeout,
            default_model=cfg.default_model,
            transport=transport,
        )

    def build_task(
        self,
        positive_prompt: str,
        aspect: Aspect,
        model: str | None = None,
    ) -> TaskDescriptor:
        """Build one ``imageInference`` task for *positive_prompt*.

        Width and height come from the fixed aspect table; steps and CFG
        scale are the fixed sampling defaults.
        """
        spec = aspect_spec(aspect)
        return TaskDescriptor(
            task_uuid=str(uuid.uuid4()),
            positive_prompt=positive_prompt,
            negative_prompt=NEGATIVE_PROMPT,
            height=spec.height,
            width=spec.width,
            model=model or self.default_model,
            steps=DEFAULT_STEPS,
            cfg_scale=DEFAULT_CFG,
            number_results=1,
        )

    async def run_tasks(self, tasks: Sequence[TaskDescriptor]) -> list[RemoteResult]:
        """Send *tasks* to Runware in one request.

        Args:
            tasks: Task descriptors, in the order results should come back.

        Returns:
            One :class:`RemoteResult` per returned record.  When every record
            echoes its ``taskUUID`` the list follows task order; otherwise it
            follows response order.

        Raises:
            RemoteError: On a transport failure, a timeout, or a non-2xx
                response.
            ResponseFormatError: If the response body cannot be decoded as
                JSON, does not have one of the accepted shapes, or echoes
                task ids that do not match the submitted tasks.
        """
        payload = [task.model_dump(by_alias=True) for task in tasks]
        logger.info(f"Submitting {len(payload)} task(s) to Runware")

        try:
            response = await self._http.post(self.api_url, json=payload)
        except httpx.TimeoutException as e:
            raise RemoteError(f"Runware API request timed out: {e}", body=str(e)) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise RemoteError(f"Runware API request failed: {e}", body=str(e)) from e

        if not response.is_success:
            raise RemoteError(
                f"Runware API error {response.status_code}: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise ResponseFormatError(
                f"Runware API returned an unreadable body: {response.text[:200]}"
            ) from e

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Runware API response: {json.dumps(body, indent=2)}")
        return align_results(tasks, parse_results(body))

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._http.aclose()


def parse_results(body: object) -> list[RemoteResult]:
    """Validate a decoded Runware response body.

    Accepts a bare list of result records or an object whose ``data`` field
    is such a list.

    Raises:
        ResponseFormatError: If the body has neither shape, or a record
            lacks a usable ``imageURL``.
    """
    if isinstance(body, list):
        records = body
    elif isinstance(body, dict) and isinstance(body.get("data"), list):
        records = body["data"]
    else:
        raise ResponseFormatError(f"Unexpected response format: {json.dumps(body)}")

    try:
        return [RemoteResult.model_validate(record) for record in records]
    except ValidationError as e:
        raise ResponseFormatError(f"Unexpected result record: {e}") from e


def align_results(
    tasks: Sequence[TaskDescriptor],
    results: list[RemoteResult],
) -> list[RemoteResult]:
    """Order *results* to match *tasks* using the echoed ``taskUUID``.

    Runware may finish tasks out of order.  Results that all carry a task id
    are re-ordered to follow *tasks*; if any result lacks one, the response
    order is kept.

    Raises:
        ResponseFormatError: If an echoed task id does not belong to any
            submitted task, or a task id is echoed twice.
    """
    if not results or any(result.task_uuid is None for result in results):
        return results

    by_task: dict[str, RemoteResult] = {}
    for result in results:
        if result.task_uuid in by_task:
            raise ResponseFormatError(f"Duplicate result for task {result.task_uuid}")
        by_task[result.task_uuid] = result

    submitted = {task.task_uuid for task in tasks}
    unknown = set(by_task) - submitted
    if unknown:
        raise ResponseFormatError(f"Results for unknown tasks: {sorted(unknown)}")

    return [by_task[task.task_uuid] for task in tasks if task.task_uuid in by_task]
