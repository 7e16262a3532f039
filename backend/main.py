"""
NPV Sweep Backend — FastAPI Application Entry Point

This is the main entry point for the NPV Sweep API server.
It configures the FastAPI application, includes all routers, sets up CORS,
and manages the outbound HTTP client used to reach a remote NPV engine.

Architecture:
    - FastAPI application with auto-generated OpenAPI docs at /docs
    - CORS enabled for the Streamlit frontend
    - All routers mounted under the /api prefix
    - Compute capability chosen on startup via lifespan event:
      in-process engine by default, remote engine when NPV_ENGINE_URL is set

Usage:
    python -m uvicorn backend.main:app --host 127.0.0.1 --port 8050
"""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import configure_logging, get_settings
from .routers import npv, sweep
from .services import build_compute

logger = logging.getLogger("npvsweep.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    - On startup: configure logging and select the compute capability
    - On shutdown: close the shared httpx client, if one was opened
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    if settings.engine_url:
        async with httpx.AsyncClient(timeout=settings.http_timeout_s) as client:
            app.state.compute = build_compute(settings, client)
            logger.info("Sweeps dispatch to remote NPV engine at %s", settings.engine_url)
            yield
    else:
        app.state.compute = build_compute(settings)
        logger.info("Sweeps compute NPV in-process")
        yield


# Create FastAPI application
app = FastAPI(
    title="NPV Sweep",
    description=(
        "REST API for net present value analysis. "
        "Computes NPV for a single discount rate or sweeps a range of rates "
        "to produce an NPV sensitivity curve."
    ),
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount all routers
app.include_router(npv.router)     # /api/npv (single-rate engine)
app.include_router(sweep.router)   # /api/npv/sweep


@app.get("/")
def root():
    """Health check and API information endpoint."""
    return {
        "name": "NPV Sweep API",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs",
        "endpoints": {
            "calculate": "/api/npv/calculate",
            "sweep": "/api/npv/sweep",
        },
    }


@app.get("/health")
def health_check():
    """Simple health check for monitoring."""
    return {"status": "healthy"}
