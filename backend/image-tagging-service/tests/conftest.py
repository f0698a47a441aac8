"""
Pytest configuration and fixtures for image tagging tests.
Provides upload builders, a stubbed LLM API and an app client wired to it.
"""

import asyncio
import io
import json
from collections.abc import Callable
from typing import Any, Optional

import httpx
import pytest
from fastapi import UploadFile
from fastapi.testclient import TestClient
from starlette.datastructures import Headers

from clients.llm_client import LlmApiClient
from main import app
from routes.image_tagging import get_llm_client

LLM_BASE_URL = "https://llm.test"
LLM_TOKEN = "test-token"


def fake_image_bytes() -> bytes:
    return b"fake image content"


def completion_body(content: Optional[str]) -> dict[str, Any]:
    return {
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "created": 1736937000,
        "model": "gpt-5",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 812, "completion_tokens": 24, "total_tokens": 836},
    }


def make_upload(
    data: bytes,
    content_type: Optional[str] = "image/jpeg",
    filename: str = "photo.jpg",
    size: Optional[int] = -1,
) -> UploadFile:
    """Build an UploadFile the way the multipart parser does."""
    headers = Headers({"content-type": content_type}) if content_type is not None else Headers({})
    return UploadFile(
        file=io.BytesIO(data),
        size=len(data) if size == -1 else size,
        filename=filename,
        headers=headers,
    )


class StubLlmApi:
    """Records outgoing requests and answers with a configurable response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: Any = completion_body("nature, landscape, mountains, sky")
        self.error: Optional[Exception] = None

    def reply(self, status_code: int = 200, body: Any = None) -> None:
        self.status_code = status_code
        self.body = body

    def fail_with(self, error: Exception) -> None:
        self.error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, (bytes, str)):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_payload(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)


@pytest.fixture(scope="function")
def stub_llm() -> StubLlmApi:
    return StubLlmApi()


@pytest.fixture(scope="function")
def llm_client(stub_llm: StubLlmApi):
    client = LlmApiClient(
        base_url=LLM_BASE_URL,
        api_token=LLM_TOKEN,
        transport=httpx.MockTransport(stub_llm.handler),
    )
    yield client
    asyncio.run(client.close())


@pytest.fixture(scope="function")
def api_client(llm_client: LlmApiClient):
    app.dependency_overrides[get_llm_client] = lambda: llm_client
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def upload_image(api_client: TestClient) -> Callable[..., httpx.Response]:
    def _upload(
        data: bytes = fake_image_bytes(),
        content_type: str = "image/jpeg",
        filename: str = "photo.jpg",
    ) -> httpx.Response:
        return api_client.post(
            "/api/ImageTagging/generate-tags",
            files={"image": (filename, data, content_type)},
        )

    return _upload
