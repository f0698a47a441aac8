"""Custom exceptions for the image tagging service."""

from typing import Optional


class ServiceError(Exception):
    """Base exception for service errors.

    All custom exceptions should inherit from this class. The message is
    what the caller sees; anything diagnostic belongs in the log.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        service_name: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        """Initialize service error.

        Args:
            message: Error message returned to the caller
            status_code: HTTP status code
            service_name: Name of the service that raised the error
            details: Additional error details (logged, never returned)
        """
        self.message = message
        self.status_code = status_code
        self.service_name = service_name
        self.details = details or {}
        super().__init__(self.message)


class NoImageProvidedError(ServiceError):
    """Raised when the upload is missing or has zero length."""

    def __init__(self, message: str = "No image file provided."):
        super().__init__(message=message, status_code=400)


class InvalidImageFormatError(ServiceError):
    """Raised when the declared content type is not an allowed image type.

    Only the content type supplied with the upload is checked; the bytes
    themselves are not sniffed.
    """

    def __init__(
        self,
        message: str = "Invalid image format. Supported formats: JPEG, PNG, GIF, BMP.",
        content_type: Optional[str] = None,
    ):
        details = {}
        if content_type:
            details["content_type"] = content_type

        super().__init__(message=message, status_code=400, details=details)


class TagExtractionFailedError(ServiceError):
    """Raised when the LLM answered but no usable tags could be extracted.

    This occurs when:
    - The response has no choices
    - The first choice has no message
    - The message content is empty or blank
    - The content holds nothing but commas and whitespace
    """

    def __init__(self, message: str = "Failed to extract tags from LLM response."):
        super().__init__(message=message, status_code=400, service_name="llm-api")


class UpstreamApiError(ServiceError):
    """Raised when the LLM API answers with a non-success status.

    The upstream status code is mirrored to the caller; the upstream body
    is kept in ``details`` for logging only.
    """

    def __init__(
        self,
        upstream_status_code: int,
        message: str = "Failed to analyze image with LLM API.",
        response_body: Optional[str] = None,
    ):
        self.upstream_status_code = upstream_status_code
        details = {}
        if response_body:
            details["response_body"] = response_body

        super().__init__(
            message=message,
            status_code=upstream_status_code,
            service_name="llm-api",
            details=details,
        )


class InternalError(ServiceError):
    """Raised for any failure the caller cannot act on.

    This occurs when:
    - The LLM API is unreachable or times out
    - The LLM API returns a body that is not valid JSON
    - An unexpected exception escapes the tagging pipeline
    """

    def __init__(
        self,
        message: str = "An internal server error occurred while processing the image.",
        service_name: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        super().__init__(
            message=message,
            status_code=500,
            service_name=service_name,
            details=details,
        )
