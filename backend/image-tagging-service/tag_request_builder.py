"""Builds the chat completion request that asks the LLM for image tags."""

import base64
from typing import Optional

from schemas.llm import (
    ImageUrl,
    ImageUrlContentItem,
    LlmApiRequest,
    LlmRequestMessage,
    TextContentItem,
)

DEFAULT_CONTENT_TYPE = "application/octet-stream"

TAGGING_PROMPT = (
    "Analyze this image and generate descriptive tags for a stock media marketplace. "
    "Return between 15 and 40 tags as a single comma-separated list. "
    "Each tag must be lowercase and specific; join multi-word tags with hyphens "
    "(for example: golden-retriever, sunset-over-ocean, rustic-wooden-table). "
    "Cover the main subjects and objects, visual characteristics such as colors, "
    "composition and lighting, the setting and context, technical aspects such as "
    "shot type, angle and focus, and the overall mood or emotion. "
    "Return only the comma-separated tags without any additional text, numbering "
    "or explanation."
)


def encode_image(image_bytes: bytes) -> str:
    """Standard base64 without line breaks."""
    return base64.b64encode(image_bytes).decode("ascii")


def build_data_uri(image_bytes: bytes, content_type: Optional[str]) -> str:
    """Build a ``data:<mime>;base64,<payload>`` URI for the image."""
    mime_type = content_type or DEFAULT_CONTENT_TYPE
    return f"data:{mime_type};base64,{encode_image(image_bytes)}"


def build_tagging_request(
    image_bytes: bytes,
    content_type: Optional[str],
    model: str,
    temperature: Optional[float] = None,
    max_tokens: Optional[int] = None,
    top_p: Optional[float] = None,
) -> LlmApiRequest:
    """Assemble the tagging request for one image.

    The request holds a single user message whose content is the tagging
    prompt followed by the image as a data URI. Images are forwarded at
    their original size.

    Args:
        image_bytes: Raw image bytes
        content_type: Declared MIME type of the image
        model: Model identifier
        temperature: Optional sampling temperature
        max_tokens: Optional completion token limit
        top_p: Optional nucleus sampling value

    Returns:
        LlmApiRequest ready to be serialized
    """
    message = LlmRequestMessage(
        role="user",
        content=[
            TextContentItem(text=TAGGING_PROMPT),
            ImageUrlContentItem(
                image_url=ImageUrl(url=build_data_uri(image_bytes, content_type))
            ),
        ],
    )

    return LlmApiRequest(
        model=model,
        messages=[message],
        temperature=temperature,
        max_tokens=max_tokens,
        top_p=top_p,
    )
