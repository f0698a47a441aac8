import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from clients.llm_client import LlmApiClient
from config import settings
from exceptions import InternalError, ServiceError
from routes import health, image_tagging

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the shared LLM API client and close it on shutdown."""
    async with LlmApiClient() as llm_client:
        app.state.llm_client = llm_client
        logger.info(f"LLM API client ready for {settings.llm_api_base_url}")
        yield


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Generates descriptive tags for uploaded images using a vision LLM",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Global exception handlers
@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    """Render ServiceError as its status code and bare message."""
    logger.error(
        f"Service error: {exc.message} (status: {exc.status_code}, "
        f"service: {exc.service_name}, details: {exc.details})"
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.message,
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.error(f"Unexpected error: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=InternalError().message,
    )


# Include routers
app.include_router(health.router)
app.include_router(image_tagging.router)


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc",
        "endpoints": {
            "generate_tags": "/api/ImageTagging/generate-tags",
        },
        "health_endpoints": {
            "basic": "/health",
            "services": "/health/services",
        },
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
