"""Shared pytest fixtures for Ad Studio tests."""

from __future__ import annotations

import json
from collections.abc import Generator

import httpx
import pytest
from fastapi.testclient import TestClient

from adstudio.api.main import create_app
from adstudio.api.models import AdInput
from adstudio.core.config import AdStudioConfig
from adstudio.core.prompt_store import InMemoryPromptStore
from adstudio.core.runware_client import RunwareClient
from adstudio.core.service import ImageService


class RunwareStub:
    """Stand-in for the Runware tasks endpoint.

    Records every request it receives.  By default it answers with one
    result per submitted task, wrapped in a ``data`` object.  Set
    ``status_code`` and ``text`` to answer with an error, ``body`` to
    answer with an arbitrary JSON document, or ``content`` to answer with
    raw bytes.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: object | None = None
        self.text: str | None = None
        self.content: bytes | None = None

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def last_tasks(self) -> list[dict]:
        """Return the task list sent with the most recent request."""
        return json.loads(self.requests[-1].content)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        if self.body is not None:
            return httpx.Response(self.status_code, json=self.body)

        tasks = json.loads(request.content)
        results = [
            {
                "taskType": "imageInference",
                "taskUUID": task["taskUUID"],
                "imageURL": f"https://im.runware.ai/image/{task['taskUUID']}.jpg",
                "seed": 1000 + index,
                "cost": 0.0026,
            }
            for index, task in enumerate(tasks)
        ]
        return httpx.Response(self.status_code, json={"data": results})


@pytest.fixture
def test_config() -> AdStudioConfig:
    """Create a configuration isolated from the environment and ``.env``."""
    return AdStudioConfig(
        runware_api_key="test-key",
        runware_api_url="https://api.runware.test/v1/tasks",
        request_timeout=5.0,
        _env_file=None,
    )


@pytest.fixture
def ad_input() -> AdInput:
    """A valid ad input for acme.io."""
    return AdInput(
        company_url="https://acme.io",
        business_value="saves time",
        audience="CEO, CTO",
        body_text="Ship faster with Acme.",
        footer_text="Try now",
    )


@pytest.fixture
def ad_payload() -> dict:
    """The camelCase JSON form of an ad input, as the browser sends it."""
    return {
        "companyUrl": "https://www.acme.io",
        "productName": "Flow",
        "businessValue": "saves time",
        "audience": "CEO, CTO, VP Engineering, Founder",
        "bodyText": "Ship faster with Acme.",
        "footerText": "Try now",
        "renderCtaOnImage": True,
    }


@pytest.fixture
def prompt_store() -> InMemoryPromptStore:
    """An empty in-memory prompt store."""
    return InMemoryPromptStore()


@pytest.fixture
def runware_stub() -> RunwareStub:
    """A fresh Runware endpoint stub."""
    return RunwareStub()


@pytest.fixture
def runware_client(test_config: AdStudioConfig, runware_stub: RunwareStub) -> RunwareClient:
    """A Runware client whose requests are answered by ``runware_stub``."""
    return RunwareClient.from_config(test_config, transport=httpx.MockTransport(runware_stub))


@pytest.fixture
def image_service(
    runware_client: RunwareClient, prompt_store: InMemoryPromptStore
) -> ImageService:
    """An image service wired to the stubbed client and an empty store."""
    return ImageService(runware_client, prompt_store)


@pytest.fixture
def test_client(
    test_config: AdStudioConfig, image_service: ImageService
) -> Generator[TestClient, None, None]:
    """A FastAPI test client running the full application lifecycle."""
    app = create_app(test_config, service=image_service)
    with TestClient(app) as client:
        yield client
