"""
Study-Abroad Counsellor - FastAPI Application

Main entry point for the backend API.
Provides endpoints for the university catalog, fit-scored recommendations,
profile strength and the AI counsellor chat.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from counsellor import __version__
from counsellor.config.settings import settings
from counsellor.domain.services import RecommendationService
from counsellor.infrastructure.ai.gemini_service import (
    CounsellorChatService,
    create_genai_client,
)
from counsellor.infrastructure.catalog import UniversityRepository
from counsellor.infrastructure.exceptions import (
    AIServiceError,
    ConfigurationError,
    CounsellorError,
    NotFoundError,
    RateLimitError,
)

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    # Startup
    logger.info(f"Counsellor backend starting in {settings.environment} mode...")

    repository = UniversityRepository.from_file(settings.catalog_path)
    recommendation_service = RecommendationService(repository)
    app.state.university_repository = repository
    app.state.recommendation_service = recommendation_service

    app.state.chat_service = None
    if settings.chat_enabled:
        app.state.chat_service = CounsellorChatService(
            client=create_genai_client(settings.google_api_key),
            recommendations=recommendation_service,
            model=settings.gemini_model,
            context_universities=settings.chat_context_universities,
            temperature=settings.gemini_temperature,
            max_output_tokens=settings.gemini_max_output_tokens,
        )
        logger.info(f"AI counsellor enabled with model: {settings.gemini_model}")
    else:
        logger.warning("GOOGLE_API_KEY not set. AI counsellor chat is disabled.")

    yield

    # Shutdown
    logger.info("Counsellor backend shutting down...")


app = FastAPI(
    title="Study-Abroad Counsellor",
    description="University fit scoring and AI counselling for students applying abroad",
    version=__version__,
    lifespan=lifespan,
    debug=settings.debug_enabled,
)

# CORS configuration from Settings
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Exception Handlers
# ============================================================================

@app.exception_handler(NotFoundError)
async def not_found_error_handler(request: Request, exc: NotFoundError):
    """Handle not found errors."""
    return JSONResponse(
        status_code=404,
        content=exc.to_dict(),
    )


@app.exception_handler(RateLimitError)
async def rate_limit_error_handler(request: Request, exc: RateLimitError):
    """Handle rate limit errors."""
    return JSONResponse(
        status_code=429,
        content=exc.to_dict(),
    )


@app.exception_handler(AIServiceError)
async def ai_service_error_handler(request: Request, exc: AIServiceError):
    """Handle upstream language-model failures."""
    logger.error(f"AI service error: {exc.message}")
    return JSONResponse(
        status_code=502,
        content=exc.to_dict(),
    )


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    """Handle features that are unavailable due to missing configuration."""
    return JSONResponse(
        status_code=503,
        content=exc.to_dict(),
    )


@app.exception_handler(CounsellorError)
async def general_error_handler(request: Request, exc: CounsellorError):
    """Handle all other application errors."""
    logger.error(f"Unhandled application error: {exc.message}")
    return JSONResponse(
        status_code=500,
        content=exc.to_dict(),
    )


# ============================================================================
# Health Check
# ============================================================================

@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "study-abroad-counsellor"}


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Study-Abroad Counsellor API",
        "version": __version__,
        "docs": "/docs",
    }


# ============================================================================
# Import and register routers
# ============================================================================

from counsellor.api.routes import chat, profiles, universities  # noqa: E402

app.include_router(universities.router, prefix="/api", tags=["Universities"])
app.include_router(profiles.router, prefix="/api", tags=["Profiles"])
app.include_router(chat.router, prefix="/api", tags=["AI Counsellor"])
