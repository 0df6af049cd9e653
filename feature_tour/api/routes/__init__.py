"""API routes package.

This module contains all route handlers for the HTTP API.
"""

from feature_tour.api.routes.health import router as health_router
from feature_tour.api.routes.paginator import router as paginator_router
from feature_tour.api.routes.topics import router as topics_router
from feature_tour.api.routes.websocket import router as websocket_router

__all__ = [
    "health_router",
    "paginator_router",
    "topics_router",
    "websocket_router",
]
