"""Image tagging request and response schemas."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class UploadedImage(BaseModel):
    """Image upload that passed validation, held for one request only."""

    content_type: str = Field(..., description="Declared MIME type")
    data: bytes = Field(..., description="Raw image bytes")
    filename: Optional[str] = Field(None, description="Original filename")

    @property
    def size(self) -> int:
        """Image size in bytes."""
        return len(self.data)

    class Config:
        frozen = True


class ImageTagsResponse(BaseModel):
    """Response schema for generated image tags."""

    tags: List[str] = Field(..., description="Trimmed, non-empty tags in model order")
    image_size: int = Field(..., alias="imageSize", description="Image size in bytes")
    processed_at: datetime = Field(
        ..., alias="processedAt", description="Processing timestamp (UTC)"
    )

    class Config:
        frozen = True
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "tags": ["mountain-landscape", "snow-capped-peaks", "blue-sky"],
                "imageSize": 204800,
                "processedAt": "2025-01-15T10:30:00Z",
            }
        }
