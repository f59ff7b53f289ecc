# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Ameo server.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main
# =============================================================================

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.exceptions import (
    AmeoException,
    ameo_exception_handler,
    general_exception_handler,
    not_found_handler,
    validation_exception_handler,
)
from app.routers import assets, feedback, health, messages, speech
from lib.database import dispose_engine, init_database

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - Startup: create messaging tables if a database is configured
    - Shutdown: dispose the database engine
    """
    logger.info(f"Starting Ameo server in {settings.ENVIRONMENT} mode")
    logger.info(f"Serving assets from {settings.ASSETS_DIR}")
    if not settings.DEEPSEEK_API_KEY:
        logger.warning("DEEPSEEK_API_KEY not set - feedback will use canned tips")

    init_database()

    yield

    logger.info("Shutting down Ameo server")
    dispose_engine()


# Create FastAPI application
app = FastAPI(
    title="Ameo Server",
    description="""
## Ameo: the design cat's backend

Serves the mascot's sprite images, asks an LLM for design feedback and
mascot speech, and stores cat-to-cat direct messages.

| Area | Endpoints |
|------|-----------|
| **Assets** | `GET /`, `GET /{file}` |
| **Feedback** | `POST /api/feedback` |
| **Speech** | `POST /api/speech`, `GET /api/speech/daily` |
| **Messages** | `/api/messages/...` (requires `DATABASE_URL`) |
""",
    version=health.API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "Health", "description": "API health and readiness checks"},
        {"name": "Feedback", "description": "LLM design feedback for Figma frames"},
        {"name": "Speech", "description": "Short lines for the cat mascot"},
        {"name": "Messages", "description": "Two-party direct messaging"},
        {"name": "Assets", "description": "Mascot sprite images"},
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# The Figma plugin runs on a null origin, so CORS is open outside production
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(AmeoException)
async def handle_ameo_exception(request: Request, exc: AmeoException):
    """Handle custom Ameo exceptions."""
    return await ameo_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_error(request: Request, exc: RequestValidationError):
    """Handle request body/path validation errors."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(404)
async def handle_not_found(request: Request, exc: StarletteHTTPException):
    """Handle unknown routes."""
    return await not_found_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    return await general_exception_handler(request, exc)


# =============================================================================
# Routers
# =============================================================================

app.include_router(health.router, tags=["Health"])

app.include_router(feedback.router, prefix="/api", tags=["Feedback"])

app.include_router(speech.router, prefix="/api", tags=["Speech"])

app.include_router(messages.router, prefix="/api/messages", tags=["Messages"])

# Catch-all /{asset_name} - must stay last
app.include_router(assets.router, tags=["Assets"])


if __name__ == "__main__":
    uvicorn.run("app.main:app", host=settings.API_HOST, port=settings.API_PORT, reload=settings.DEBUG)
