"""Core business logic and protocols.

This module contains the platform-agnostic topic model, pagination logic and
the paginator state holder, plus the logging, error and settings plumbing
shared by the adapters and the API.
"""

from feature_tour.core.config import Settings
from feature_tour.core.errors import (
    CatalogError,
    ConfigurationError,
    ErrorCategory,
    FeatureTourError,
)
from feature_tour.core.health import (
    ComponentCheck,
    HealthReport,
    ServiceStatus,
    build_report,
    check_catalog,
    check_paginator,
)
from feature_tour.core.logging import (
    configure_logging,
    connection_context,
    get_logger,
)
from feature_tour.core.pagination import PaginationController, PaginatorState, clamp_index
from feature_tour.core.paginator import FeaturePaginator, Subscription
from feature_tour.core.topics import Topic, validate_catalog

__all__ = [
    # Topics and pagination
    "FeaturePaginator",
    "PaginationController",
    "PaginatorState",
    "Subscription",
    "Topic",
    "clamp_index",
    "validate_catalog",
    # Configuration
    "Settings",
    # Error handling
    "CatalogError",
    "ConfigurationError",
    "ErrorCategory",
    "FeatureTourError",
    # Health checks
    "ComponentCheck",
    "HealthReport",
    "ServiceStatus",
    "build_report",
    "check_catalog",
    "check_paginator",
    # Logging
    "configure_logging",
    "connection_context",
    "get_logger",
]
