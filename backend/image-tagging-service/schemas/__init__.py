"""Pydantic schemas for the image tagging service."""

from schemas.responses import HealthResponse
from schemas.tagging import ImageTagsResponse, UploadedImage
from schemas.llm import (
    ImageUrl,
    ImageUrlContentItem,
    LlmApiRequest,
    LlmApiResponse,
    LlmChoice,
    LlmMessage,
    LlmRequestMessage,
    LlmTool,
    LlmToolParameter,
    LlmUsage,
    TextContentItem,
)

__all__ = [
    "HealthResponse",
    "ImageTagsResponse",
    "UploadedImage",
    "ImageUrl",
    "ImageUrlContentItem",
    "LlmApiRequest",
    "LlmApiResponse",
    "LlmChoice",
    "LlmMessage",
    "LlmRequestMessage",
    "LlmTool",
    "LlmToolParameter",
    "LlmUsage",
    "TextContentItem",
]
