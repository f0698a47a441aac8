"""Image tagging endpoints."""

import logging
from typing import Optional, Union

from fastapi import APIRouter, Depends, File, Request, UploadFile, status

from clients.llm_client import LlmApiClient
from schemas.tagging import ImageTagsResponse
from tagging_service import ImageTaggingService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ImageTagging", tags=["Image Tagging"])


def get_llm_client(request: Request) -> LlmApiClient:
    """Shared LLM API client created at application startup."""
    return request.app.state.llm_client


def get_tagging_service(
    llm_client: LlmApiClient = Depends(get_llm_client),
) -> ImageTaggingService:
    return ImageTaggingService(llm_client)


@router.post(
    "/generate-tags",
    response_model=ImageTagsResponse,
    status_code=status.HTTP_200_OK,
    summary="Generate image tags",
    description="Upload an image (JPEG, PNG, GIF or BMP) as the multipart field "
    "`image` and receive descriptive tags suggested by the LLM API. "
    "Nothing is stored.",
)
async def generate_tags(
    image: Union[UploadFile, str, None] = File(None, description="Image file to tag"),
    service: ImageTaggingService = Depends(get_tagging_service),
):
    """Generate descriptive tags for an uploaded image.

    Errors are raised as ServiceError subclasses and rendered by the
    application exception handlers:
        400: No image, unsupported format, or no tags in the LLM output
        4xx/5xx: LLM API error status, mirrored
        500: Any other failure

    Args:
        image: Uploaded image file
        service: Tagging pipeline

    Returns:
        ImageTagsResponse serialized as {tags, imageSize, processedAt}
    """
    return await service.generate_tags(image)
