"""Validation of uploaded images before they are sent for tagging.

Only metadata is checked: the upload must be present and non-empty, and
its declared content type must be one of the allowed image types. The
bytes are not sniffed, so a PNG declared as ``image/jpeg`` passes and
is forwarded with the declared type.
"""

import logging
from typing import Optional, Union

from starlette.datastructures import UploadFile

from exceptions import InvalidImageFormatError, NoImageProvidedError
from schemas.tagging import UploadedImage

logger = logging.getLogger(__name__)

ALLOWED_CONTENT_TYPES = frozenset(
    {
        "image/jpeg",
        "image/jpg",
        "image/png",
        "image/gif",
        "image/bmp",
    }
)


def is_allowed_content_type(content_type: Optional[str]) -> bool:
    """Check a declared content type against the allow-list, ignoring case."""
    if not content_type:
        return False
    return content_type.lower() in ALLOWED_CONTENT_TYPES


def validate_upload(image: Optional[Union[UploadFile, str]]) -> UploadFile:
    """Validate upload metadata without reading the file.

    Args:
        image: Uploaded file, or None or text when the form had no file in
            its ``image`` field

    Returns:
        The same upload, for chaining

    Raises:
        NoImageProvidedError: If the upload is missing or has zero length
        InvalidImageFormatError: If the content type is missing or not allowed
    """
    if not isinstance(image, UploadFile) or image.size == 0:
        raise NoImageProvidedError()

    if not is_allowed_content_type(image.content_type):
        logger.info(f"Rejected upload with content type {image.content_type!r}")
        raise InvalidImageFormatError(content_type=image.content_type)

    return image


async def read_upload(image: UploadFile) -> UploadedImage:
    """Read a validated upload into memory.

    The multipart parser normally reports the size up front; when it
    does not, an empty body is caught here instead.

    Raises:
        NoImageProvidedError: If the upload turns out to be empty
    """
    data = await image.read()
    if not data:
        raise NoImageProvidedError()

    return UploadedImage(
        content_type=image.content_type,
        data=data,
        filename=image.filename,
    )
