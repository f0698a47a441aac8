"""Extraction of tags from a chat completion response."""

import logging
from typing import List, Optional

from exceptions import TagExtractionFailedError
from schemas.llm import LlmApiResponse

logger = logging.getLogger(__name__)


def extract_content(response: LlmApiResponse) -> Optional[str]:
    """Return the message content of the first choice, if any.

    Later choices are ignored.
    """
    if not response.choices:
        return None

    choice = response.choices[0]
    if choice is None or choice.message is None:
        return None

    return choice.message.content


def parse_tags(content: Optional[str]) -> List[str]:
    """Split comma-separated model output into clean tags.

    Segments are trimmed and empty ones dropped, so trailing commas,
    doubled commas and whitespace-only segments disappear. Order is kept
    and duplicates are not removed.

    Raises:
        TagExtractionFailedError: If no tag survives
    """
    text = (content or "").strip()
    if not text:
        logger.warning("LLM API returned empty or blank content")
        raise TagExtractionFailedError()

    tags = [segment.strip() for segment in text.split(",")]
    tags = [tag for tag in tags if tag]

    if not tags:
        logger.warning("LLM API content contained no tags")
        raise TagExtractionFailedError()

    return tags


def extract_tags(response: LlmApiResponse) -> List[str]:
    """Extract tags from the first choice of a completion."""
    return parse_tags(extract_content(response))
