"""LLM API client for chat completions."""

import json
import logging
from typing import Dict, Optional

import httpx
from pydantic import ValidationError

from clients.base_client import ServiceClient
from config import settings
from exceptions import InternalError, UpstreamApiError
from schemas.llm import LlmApiRequest, LlmApiResponse

logger = logging.getLogger(__name__)

CHAT_COMPLETIONS_PATH = "/v1/chat/completions"


class LlmApiClient(ServiceClient):
    """Client for the vision-capable chat completion API.

    Handles:
    - Per-request bearer authorization
    - Classifying the HTTP outcome of a completion call
    - Decoding the completion envelope
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_token: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize LLM API client from settings, with optional overrides."""
        super().__init__(
            base_url=base_url or settings.llm_api_base_url,
            timeout=timeout if timeout is not None else settings.llm_timeout,
            transport=transport,
        )
        self._api_token = (
            api_token if api_token is not None else settings.llm_api_token.get_secret_value()
        )

    def _headers(self) -> Dict[str, str]:
        """Headers for one outgoing request."""
        return {
            "Authorization": f"Bearer {self._api_token}",
            "Accept": "application/json",
        }

    async def create_chat_completion(self, request: LlmApiRequest) -> LlmApiResponse:
        """Send a chat completion request.

        Args:
            request: Completion request

        Returns:
            Parsed completion envelope (choices may still be empty)

        Raises:
            InternalError: If the call fails in transport or the body is not
                a JSON object matching the envelope
            UpstreamApiError: If the API answers with a non-2xx status
        """
        logger.info(f"Sending request to LLM API: {self.base_url}{CHAT_COMPLETIONS_PATH}")

        response = await self._request(
            "POST",
            CHAT_COMPLETIONS_PATH,
            headers=self._headers(),
            json=request.to_payload(),
        )

        if not response.is_success:
            logger.error(
                f"LLM API request failed. Status: {response.status_code}, "
                f"Response: {response.text}"
            )
            raise UpstreamApiError(
                upstream_status_code=response.status_code,
                response_body=response.text,
            )

        logger.info("LLM API response received successfully")
        return self._parse_response(response)

    def _parse_response(self, response: httpx.Response) -> LlmApiResponse:
        """Decode the completion envelope from a successful response."""
        try:
            payload = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"LLM API returned malformed JSON: {str(e)}")
            raise InternalError(
                service_name=self._get_service_name(),
                details={"reason": "malformed_json"},
            ) from e

        if not isinstance(payload, dict):
            logger.error(f"LLM API returned JSON {type(payload).__name__}, expected object")
            raise InternalError(
                service_name=self._get_service_name(),
                details={"reason": "unexpected_json"},
            )

        try:
            return LlmApiResponse.model_validate(payload)
        except ValidationError as e:
            logger.error(f"LLM API response did not match the completion schema: {str(e)}")
            raise InternalError(
                service_name=self._get_service_name(),
                details={"reason": "schema_mismatch"},
            ) from e
