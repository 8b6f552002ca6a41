# src/fritter/main.py
"""Main entry point for the Fritter application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from fritter.api.v1 import freets_router, satellites_router, users_router
from fritter.core.errors import GateRejection
from fritter.core.settings import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Fritter API",
    description="Short posts with expanded commentary, sources and similar-post links",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Include API routers
app.include_router(users_router, prefix="/api/v1")
app.include_router(freets_router, prefix="/api/v1")
app.include_router(satellites_router, prefix="/api/v1")


@app.exception_handler(GateRejection)
async def handle_gate_rejection(request: Request, exc: GateRejection) -> JSONResponse:
    """Render a failed gate check as ``{"error": ...}`` with the check's status."""
    logger.debug("%s %s rejected by %s", request.method, request.url.path, exc.check)
    return JSONResponse(status_code=exc.status_code, content=exc.as_body())


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("fritter.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
