"""Staffing Service - FastAPI Application."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .database import load_context
from .matching.validation_ledger import SkillValidationLedger
from .routers import (
    chat_router,
    employees_router,
    tasks_router,
    teams_router,
)
from .services.llm import get_text_generator
from .services.recommendation import RecommendationService

logger = logging.getLogger("staffing_service")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    # Startup
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info(f"Starting {settings.service_name} v{settings.service_version}")

    context = load_context(settings.data_path)
    app.state.context = context
    app.state.ledger = SkillValidationLedger(
        context,
        manager_ids=settings.manager_ids,
        window_days=settings.validation_window_days,
    )
    app.state.recommendation = RecommendationService(
        context,
        get_text_generator(settings),
        timeout=settings.llm_timeout_seconds,
        threshold=settings.employee_match_threshold,
    )
    logger.info(f"Text generation provider: {settings.llm_provider}")

    yield

    # Shutdown
    logger.info(f"Stopping {settings.service_name}")


settings = get_settings()

app = FastAPI(
    title="Staffing Service",
    description="Matches employees to tasks and assembles teams",
    version=settings.service_version,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(employees_router, prefix="/api")
app.include_router(tasks_router, prefix="/api")
app.include_router(chat_router, prefix="/api")
app.include_router(teams_router, prefix="/api")


@app.get("/")
async def root() -> dict:
    """Root endpoint."""
    return {
        "service": settings.service_name,
        "version": settings.service_version,
        "docs": "/docs",
    }


@app.get("/health")
async def health() -> dict:
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "staffing_service.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )
