"""Entry point for the HTTP API server.

This module provides the Uvicorn entrypoint for running the FastAPI
application as a standalone server.

Usage:
    # Development (with auto-reload):
    API_RELOAD=true python api_main.py

    # Or directly with uvicorn:
    uvicorn feature_tour.api.app:app --reload --host 0.0.0.0 --port 8000
"""

import uvicorn

from feature_tour.core.config import Settings
from feature_tour.core.logging import configure_logging

settings = Settings.from_env()

# Configure structured logging before importing app
configure_logging(development=settings.development, log_level=settings.log_level)

if __name__ == "__main__":
    # One worker: the paginator lives in process memory
    uvicorn.run(
        "feature_tour.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        workers=1,
    )
