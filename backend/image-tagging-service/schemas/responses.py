"""Response schemas shared by the service endpoints."""

from typing import Optional, Any, Dict
from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response format."""

    status: str = Field(..., description="Health status (healthy, degraded, unhealthy)")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")
    checks: Optional[Dict[str, Any]] = Field(
        None, description="Individual health check results"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "status": "healthy",
                "service": "Image Tagging Service",
                "version": "1.0.0",
                "checks": {
                    "llm_api": "reachable",
                },
            }
        }
