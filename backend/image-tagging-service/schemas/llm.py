"""Chat completion request and response schemas for the LLM API."""

from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import BaseModel, Field, model_validator


class ImageUrl(BaseModel):
    """Inline image reference, normally a ``data:`` URI."""

    url: str = Field(..., description="Image URL or data URI")


class TextContentItem(BaseModel):
    """Text part of a structured message content."""

    type: Literal["text"] = "text"
    text: str = Field(..., description="Prompt text")


class ImageUrlContentItem(BaseModel):
    """Image part of a structured message content."""

    type: Literal["image_url"] = "image_url"
    image_url: ImageUrl = Field(..., description="Image reference")


ContentItem = Annotated[
    Union[TextContentItem, ImageUrlContentItem],
    Field(discriminator="type"),
]


class LlmRequestMessage(BaseModel):
    """Chat message sent to the LLM API.

    ``content`` is either plain text or an ordered list of typed items.
    """

    role: Literal["system", "user"] = Field(..., description="Message role")
    content: Union[str, List[ContentItem]] = Field(..., description="Message content")


class LlmToolParameter(BaseModel):
    """Parameter description of a tool exposed to the model."""

    name: str
    type: str
    description: str = ""
    required: bool = False


class LlmTool(BaseModel):
    """Tool the model may call."""

    name: str
    description: str = ""
    parameters: Optional[List[LlmToolParameter]] = None


class LlmApiRequest(BaseModel):
    """Outbound chat completion request.

    Every optional field left as ``None`` is dropped from the payload
    rather than sent as ``null``.
    """

    model: str = Field(..., description="Model identifier")
    messages: List[LlmRequestMessage] = Field(..., description="Ordered chat messages")
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    top_p: Optional[float] = None
    stream: Optional[bool] = None
    tools: Optional[List[LlmTool]] = None
    enable_caching: Optional[bool] = None
    user_id: Optional[str] = None
    email: Optional[str] = None

    def to_payload(self) -> dict:
        """Serialize to the JSON body sent upstream."""
        return self.model_dump(exclude_none=True)


class CaseInsensitiveModel(BaseModel):
    """Base for inbound models whose JSON keys may differ in case.

    Keys are matched to field names ignoring case; unknown keys are
    dropped.
    """

    @model_validator(mode="before")
    @classmethod
    def _match_field_names(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        field_names = {name.lower(): name for name in cls.model_fields}
        matched = {}
        for key, value in data.items():
            if isinstance(key, str) and key.lower() in field_names:
                matched[field_names[key.lower()]] = value
        return matched


class LlmMessage(CaseInsensitiveModel):
    """Message of a returned choice."""

    role: Optional[str] = None
    content: Optional[str] = None


class LlmChoice(CaseInsensitiveModel):
    """One candidate completion."""

    index: Optional[int] = None
    message: Optional[LlmMessage] = None
    finish_reason: Optional[str] = None


class LlmUsage(CaseInsensitiveModel):
    """Token accounting of a completion."""

    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None
    cache_read_input_tokens: Optional[int] = None
    cache_write_input_tokens: Optional[int] = None


class LlmApiResponse(CaseInsensitiveModel):
    """Chat completion envelope returned by the LLM API."""

    id: Optional[str] = None
    object: Optional[str] = None
    created: Optional[int] = None
    model: Optional[str] = None
    choices: Optional[List[Optional[LlmChoice]]] = None
    usage: Optional[LlmUsage] = None
