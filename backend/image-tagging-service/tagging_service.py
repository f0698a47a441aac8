"""Image tagging pipeline: validate, build request, call the LLM, extract tags."""

import logging
from datetime import datetime, timezone
from typing import Optional, Union

from fastapi import UploadFile

from clients.llm_client import LlmApiClient
from config import Settings, settings as default_settings
from exceptions import InternalError, ServiceError
from image_validator import read_upload, validate_upload
from schemas.tagging import ImageTagsResponse
from tag_parser import extract_tags
from tag_request_builder import build_tagging_request

logger = logging.getLogger(__name__)


class ImageTaggingService:
    """Generates descriptive tags for one uploaded image per call.

    Nothing is cached or stored; every call makes exactly one request to
    the LLM API.
    """

    def __init__(self, llm_client: LlmApiClient, settings: Optional[Settings] = None):
        self.llm_client = llm_client
        self.settings = settings or default_settings

    async def generate_tags(
        self, image: Optional[Union[UploadFile, str]]
    ) -> ImageTagsResponse:
        """Run the tagging pipeline for an upload.

        Args:
            image: Uploaded image; None or text if the form had no image file

        Returns:
            ImageTagsResponse with tags, image size and processing time

        Raises:
            NoImageProvidedError: 400 if the upload is missing or empty
            InvalidImageFormatError: 400 if the content type is not allowed
            TagExtractionFailedError: 400 if the LLM output had no tags
            UpstreamApiError: LLM API status if it answered with an error
            InternalError: 500 for anything else
        """
        try:
            validate_upload(image)
            uploaded = await read_upload(image)

            logger.info(
                f"Image received. Size: {uploaded.size} bytes, "
                f"content type: {uploaded.content_type}"
            )

            request = build_tagging_request(
                uploaded.data,
                uploaded.content_type,
                model=self.settings.llm_model,
                temperature=self.settings.llm_temperature,
                max_tokens=self.settings.llm_max_tokens,
                top_p=self.settings.llm_top_p,
            )

            response = await self.llm_client.create_chat_completion(request)
            tags = extract_tags(response)

            logger.info(f"Successfully generated {len(tags)} tags for image")

            return ImageTagsResponse(
                tags=tags,
                image_size=uploaded.size,
                processed_at=datetime.now(timezone.utc),
            )

        except ServiceError:
            raise
        except Exception as e:
            logger.error(f"An error occurred while processing the image: {str(e)}", exc_info=True)
            raise InternalError() from e
