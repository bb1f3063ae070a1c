"""FastAPI application for the video generation gateway."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from videogate.config import get_settings
from videogate.exceptions import (
    GatewayError,
    MissingCredentialsError,
    UnsupportedGenerationTypeError,
    UpstreamError,
)
from videogate.routers import api, health, llm, video
from videogate.services.http import close_http_client

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Error types that mean "the field was not supplied"
_MISSING_ERROR_TYPES = {"missing", "string_too_short", "too_short"}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown."""
    settings = get_settings()

    logger.info("Starting video gateway...")
    logger.info(f"DashScope base URL: {settings.dashscope_base_url}")
    logger.info(f"LLM provider: {settings.llm_provider}")

    if not settings.dashscope_api_key:
        logger.warning("DASHSCOPE_API_KEY is not set, video generation will be unavailable")
    if not settings.llm_api_key():
        logger.warning(f"No API key for LLM provider {settings.llm_provider}")

    yield

    logger.info("Shutting down video gateway...")
    await close_http_client()
    logger.info("Video gateway shutdown complete")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def describe_validation_errors(errors) -> str:
    """Turn pydantic validation errors into a single message."""
    missing = []
    invalid = []
    for err in errors:
        # Drop the "body"/"query" prefix from the location
        loc = [str(part) for part in err.get("loc", ())[1:]]
        field = ".".join(loc) or "body"
        if err.get("type") in _MISSING_ERROR_TYPES:
            if field not in missing:
                missing.append(field)
        else:
            invalid.append(f"{field}: {err.get('msg')}")

    parts = []
    if missing:
        parts.append(f"Missing required fields: {', '.join(missing)}")
    if invalid:
        parts.append(f"Invalid request: {'; '.join(invalid)}")
    return ". ".join(parts) or "Invalid request"


async def catch_unexpected_errors(request: Request, call_next):
    """Turn unhandled errors into a JSON 500 inside the CORS layer."""
    try:
        return await call_next(request)
    except Exception as e:
        logger.error(f"Unhandled error on {request.url.path}: {e}", exc_info=True)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "An error occurred")


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as a JSON `{"error": ...}` body."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return _error(status.HTTP_400_BAD_REQUEST, describe_validation_errors(exc.errors()))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(MissingCredentialsError)
    async def credentials_error_handler(request: Request, exc: MissingCredentialsError):
        logger.error(f"{request.url.path}: {exc}")
        return _error(status.HTTP_503_SERVICE_UNAVAILABLE, str(exc))

    @app.exception_handler(UnsupportedGenerationTypeError)
    async def generation_type_error_handler(request: Request, exc: UnsupportedGenerationTypeError):
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(UpstreamError)
    async def upstream_error_handler(request: Request, exc: UpstreamError):
        logger.error(f"{request.url.path}: {exc}")
        return _error(status.HTTP_502_BAD_GATEWAY, str(exc))

    @app.exception_handler(GatewayError)
    async def gateway_error_handler(request: Request, exc: GatewayError):
        logger.error(f"{request.url.path}: {exc}", exc_info=True)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        description=settings.api_description,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Registered first so CORS headers wrap its responses
    app.middleware("http")(catch_unexpected_errors)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(health.router)
    app.include_router(api.router)
    app.include_router(video.router)
    app.include_router(llm.router)

    return app


# Create app instance
app = create_app()
