from datetime import datetime
from unittest.mock import patch

import httpx
import pytest
from fastapi.testclient import TestClient

from conftest import StubLlmApi, completion_body, fake_image_bytes

ENDPOINT = "/api/ImageTagging/generate-tags"


class TestGenerateTagsEndpoint:
    @pytest.mark.parametrize("content_type", ["image/jpeg", "image/png", "image/gif", "image/bmp"])
    def test_success(self, upload_image, content_type: str) -> None:
        response = upload_image(content_type=content_type)

        assert response.status_code == 200
        body = response.json()
        assert set(body) == {"tags", "imageSize", "processedAt"}
        assert body["tags"] == ["nature", "landscape", "mountains", "sky"]
        assert body["imageSize"] == len(fake_image_bytes())
        assert datetime.fromisoformat(body["processedAt"].replace("Z", "+00:00")).tzinfo is not None

    def test_messy_content_is_normalized(self, upload_image, stub_llm: StubLlmApi) -> None:
        stub_llm.reply(200, completion_body("nature,,landscape,   ,mountains,sky,"))

        response = upload_image()

        assert response.json()["tags"] == ["nature", "landscape", "mountains", "sky"]

    def test_missing_image_field(self, api_client: TestClient, stub_llm: StubLlmApi) -> None:
        response = api_client.post(ENDPOINT, data={"title": "no file"})

        assert response.status_code == 400
        assert response.json() == "No image file provided."
        assert stub_llm.requests == []

    def test_text_image_field(self, api_client: TestClient, stub_llm: StubLlmApi) -> None:
        response = api_client.post(ENDPOINT, data={"image": "abc"})

        assert response.status_code == 400
        assert response.json() == "No image file provided."
        assert stub_llm.requests == []

    def test_empty_body(self, api_client: TestClient) -> None:
        response = api_client.post(ENDPOINT)

        assert response.status_code == 400
        assert response.json() == "No image file provided."

    def test_empty_image(self, upload_image) -> None:
        response = upload_image(data=b"")

        assert response.status_code == 400
        assert response.json() == "No image file provided."

    def test_invalid_format(self, upload_image, stub_llm: StubLlmApi) -> None:
        response = upload_image(content_type="text/plain", filename="notes.txt")

        assert response.status_code == 400
        assert response.json() == "Invalid image format. Supported formats: JPEG, PNG, GIF, BMP."
        assert stub_llm.requests == []

    @pytest.mark.parametrize("content_type", ["IMAGE/JPEG", "Image/PNG", "IMAGE/GIF"])
    def test_content_type_case_is_ignored(self, upload_image, content_type: str) -> None:
        response = upload_image(content_type=content_type)

        assert response.status_code == 200

    @pytest.mark.parametrize("status_code", [400, 401, 403, 500, 503])
    def test_upstream_status_passthrough(
        self, upload_image, stub_llm: StubLlmApi, status_code: int
    ) -> None:
        stub_llm.reply(status_code, "upstream diagnostic detail")

        response = upload_image()

        assert response.status_code == status_code
        assert response.json() == "Failed to analyze image with LLM API."
        assert "upstream diagnostic detail" not in response.text

    @pytest.mark.parametrize(
        "body",
        [
            {"choices": []},
            {"choices": None},
            {"choices": [{"message": None}]},
            completion_body(None),
            completion_body(""),
            completion_body("   \t\n   "),
            completion_body(" , ,"),
        ],
    )
    def test_no_tags_extracted(self, upload_image, stub_llm: StubLlmApi, body: dict) -> None:
        stub_llm.reply(200, body)

        response = upload_image()

        assert response.status_code == 400
        assert response.json() == "Failed to extract tags from LLM response."

    def test_malformed_json(self, upload_image, stub_llm: StubLlmApi) -> None:
        stub_llm.reply(200, "{ invalid json")

        response = upload_image()

        assert response.status_code == 500
        assert response.json() == "An internal server error occurred while processing the image."

    def test_transport_failure(self, upload_image, stub_llm: StubLlmApi) -> None:
        stub_llm.fail_with(httpx.ConnectError("connection refused"))

        response = upload_image()

        assert response.status_code == 500
        assert response.json() == "An internal server error occurred while processing the image."

    def test_unexpected_error_details_do_not_leak(self, upload_image) -> None:
        with patch("tagging_service.build_tagging_request", side_effect=RuntimeError("secret detail")):
            response = upload_image()

        assert response.status_code == 500
        assert "secret detail" not in response.text

    def test_null_metadata_does_not_block_tags(self, upload_image, stub_llm: StubLlmApi) -> None:
        body = completion_body("a, b")
        body["choices"][0]["index"] = None
        body["usage"] = {"prompt_tokens": None, "completion_tokens": None, "total_tokens": None}
        stub_llm.reply(200, body)

        response = upload_image()

        assert response.status_code == 200
        assert response.json()["tags"] == ["a", "b"]

    def test_case_insensitive_upstream_json(self, upload_image, stub_llm: StubLlmApi) -> None:
        stub_llm.reply(200, {"Choices": [{"Message": {"Content": "Sky, Clouds"}}]})

        response = upload_image()

        assert response.status_code == 200
        assert response.json()["tags"] == ["Sky", "Clouds"]

    def test_each_request_calls_upstream_once(self, upload_image, stub_llm: StubLlmApi) -> None:
        upload_image()
        upload_image()

        assert len(stub_llm.requests) == 2
