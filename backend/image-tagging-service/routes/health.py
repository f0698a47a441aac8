"""Health check endpoints for the image tagging service."""

import logging
import httpx
from fastapi import APIRouter, status

from schemas.responses import HealthResponse
from config import settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
    description="Returns basic health status of the service. "
    "This endpoint is lightweight and suitable for liveness probes.",
)
async def health_check():
    """Basic health check endpoint.

    Returns health status without checking external dependencies.

    Returns:
        HealthResponse with status "healthy"
    """
    return HealthResponse(
        status="healthy",
        service=settings.app_name,
        version=settings.app_version,
    )


@router.get(
    "/health/services",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="External services health check",
    description="Returns health status including reachability of the LLM API. "
    "Slower than /health since it makes a network call.",
)
async def services_health_check():
    """Check that the LLM API base URL answers at all.

    Any HTTP answer counts as reachable; only transport failures mark the
    service as degraded.

    Returns:
        HealthResponse with status "healthy" or "degraded"
    """
    checks = {}
    overall_status = "healthy"

    try:
        async with httpx.AsyncClient(timeout=5.0) as client:
            response = await client.get(settings.llm_api_base_url)
            checks["llm_api"] = "reachable"
            logger.debug(f"LLM API answered health probe with {response.status_code}")
    except httpx.HTTPError as e:
        logger.error(f"LLM API check failed: {str(e)}")
        checks["llm_api"] = "unreachable"
        overall_status = "degraded"

    return HealthResponse(
        status=overall_status,
        service=settings.app_name,
        version=settings.app_version,
        checks=checks,
    )
