"""FastAPI application for the CityWatch backend."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from citywatch import __version__
from citywatch.config import get_settings
from citywatch.dependencies import limiter
from citywatch.exceptions import LoadFailure
from citywatch.routers import auth_router, health_router, incidents_router
from citywatch.services.store import IncidentStore

settings = get_settings()

# Root logger format shared by the store, ingestion and routers
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the incident store and load the source table once per process."""
    logger.info(f"Loading incidents from {settings.incidents_csv_path}")

    store = IncidentStore.from_settings(settings)
    try:
        store.load_from_csv()
    except LoadFailure as e:
        # Serve an empty collection; /health reports degraded
        logger.error(f"Starting without incidents: {e}")
    app.state.store = store

    yield

    logger.info(f"Shutting down with {len(store)} incidents in memory")


# Routers read app.state.store through get_store
app = FastAPI(
    title="CityWatch API",
    description="Role-scoped incident map API for Bangalore",
    version=__version__,
    lifespan=lifespan,
)

# Login is the only rate-limited route
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# The map frontend runs on a separate origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Sink errors and other unexpected failures surface as a plain 500
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Log the failure and hide its details from the client."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


# Health and reload stay unprefixed; the API lives under api_v1_prefix
app.include_router(health_router)
app.include_router(auth_router, prefix=settings.api_v1_prefix)
app.include_router(incidents_router, prefix=settings.api_v1_prefix)


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "CityWatch API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "citywatch.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
