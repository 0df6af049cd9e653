"""HTTP API package.

This module provides a FastAPI-based HTTP and WebSocket API that lets web
clients list topics and drive the paginator.
"""

from feature_tour.api.app import create_app
from feature_tour.api.dependencies import (
    AppState,
    get_app_state,
    get_paginator,
    get_topics,
)

__all__ = [
    "AppState",
    "create_app",
    "get_app_state",
    "get_paginator",
    "get_topics",
]
