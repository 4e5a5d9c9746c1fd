"""Main FastAPI application for the PWS weather service."""

import logging
from datetime import datetime, timezone
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Query, Depends, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from .errors import WeatherServiceError
from .models import WeatherResponse, ErrorResponse
from .services import PwsClient, ObservationService
from config.settings import settings
from config.logging import setup_logging


# Setup logging
logger = setup_logging()

STATIC_DIR = Path(__file__).parent / "static"


# Service instances
pws_client: Optional[PwsClient] = None
observation_service: Optional[ObservationService] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events."""
    global pws_client, observation_service

    logger.info("Starting PWS weather service...")

    pws_client = PwsClient(
        api_key=settings.pws_api_key,
        base_url=settings.pws_base_url,
        timeout=settings.upstream_timeout_seconds,
    )
    observation_service = ObservationService(pws_client)

    yield

    # Cleanup
    logger.info("Shutting down PWS weather service...")
    if pws_client:
        await pws_client.close()


# Create FastAPI app
app = FastAPI(
    title="PWS Weather Service",
    description="Current conditions from personal weather stations",
    version="1.0.0",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)


def get_observation_service() -> ObservationService:
    """Dependency to get the observation service instance."""
    return observation_service


@app.get("/", include_in_schema=False)
async def index():
    """Serve the station lookup page."""
    return FileResponse(STATIC_DIR / "index.html", media_type="text/html")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}


@app.get(
    "/api/weather",
    response_model=WeatherResponse,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def get_weather(
    station_id: Optional[str] = Query(None, description="PWS station identifier, e.g. KCASANFR58"),
    service: ObservationService = Depends(get_observation_service)
):
    """
    Get current conditions for a personal weather station.

    Failures are raised as WeatherServiceError subclasses and rendered by
    weather_error_handler with the status each kind carries.
    """
    return await service.get_current_conditions(station_id)


@app.exception_handler(WeatherServiceError)
async def weather_error_handler(request: Request, exc: WeatherServiceError):
    """Render a request failure as {"error": message}."""
    logger.debug(f"{request.url.path} failed with {exc.status_code}: {type(exc).__name__}")
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message).model_dump()
    )


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler."""
    logger.error(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error="Internal server error").model_dump()
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.app_host,
        port=settings.app_port,
        log_level=settings.log_level.lower()
    )
