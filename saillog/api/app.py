"""FastAPI application factory."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

import httpx
from dotenv import load_dotenv
from fastapi import FastAPI

# Load .env file from project root (must be before other imports)
load_dotenv()
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from saillog.api.routes import analytics, units, weather  # noqa: E402

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and share one HTTP client for outbound weather calls."""
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not os.environ.get("OPENWEATHER_API_KEY"):
        logger.warning("OPENWEATHER_API_KEY not set, /api/weather/current will return 503")

    async with httpx.AsyncClient(timeout=15.0) as client:
        app.state.http_client = client
        yield
    app.state.http_client = None


app = FastAPI(
    title="SailLog Analytics API",
    description="Sailing logbook trip statistics",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.environ.get("CORS_ORIGINS", "http://localhost:8081").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(analytics.router, prefix="/api")
app.include_router(weather.router, prefix="/api")
app.include_router(units.router, prefix="/api")


@app.get("/api/health")
async def health():
    return {
        "status": "ok",
        "version": app.version,
        "weather_configured": bool(os.environ.get("OPENWEATHER_API_KEY")),
    }
