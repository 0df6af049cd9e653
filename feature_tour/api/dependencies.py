"""FastAPI dependency injection for the paginator and catalog.

The paginator is owned by an AppState container that the application
factory attaches to ``app.state``; routes receive it through dependencies
rather than reaching a module global.

Example:
    from fastapi import Depends
    from feature_tour.api.dependencies import get_paginator

    @router.post("/paginator/next")
    async def next_topic(paginator: FeaturePaginator = Depends(get_paginator)):
        paginator.advance()
"""

from fastapi.requests import HTTPConnection

from feature_tour.adapters import create_catalog
from feature_tour.core.errors import FeatureTourError
from feature_tour.core.health import HealthReport, build_report, check_catalog, check_paginator
from feature_tour.core.logging import get_logger
from feature_tour.core.paginator import FeaturePaginator
from feature_tour.core.topics import Topic

logger = get_logger(__name__)


class AppState:
    """Application state container for shared resources.

    Holds the topic catalog and the single paginator shared by every
    request handler and WebSocket connection of one application.
    """

    def __init__(self) -> None:
        self._topics: tuple[Topic, ...] | None = None
        self._paginator: FeaturePaginator | None = None
        self._catalog_backend: str | None = None
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        """Check if the app state has been initialized."""
        return self._initialized

    async def initialize(
        self,
        catalog_backend: str = "static",
        topics: list[Topic] | tuple[Topic, ...] | None = None,
        initial_topic_id: str | None = None,
    ) -> None:
        """Load the catalog and build the paginator.

        Args:
            catalog_backend: Catalog adapter to load ("static" or "memory").
            topics: Topics handed to the adapter instead of its defaults.
            initial_topic_id: Topic to open first. Unknown ids leave the
                paginator on the first topic.

        Raises:
            ValueError: If the backend is not supported.
            CatalogError: If the catalog content is invalid.
        """
        if self._initialized:
            logger.warning("app_state_already_initialized")
            return

        try:
            catalog = create_catalog(catalog_backend, topics=topics)
        except FeatureTourError as ex:
            logger.error(
                "catalog_rejected",
                backend=catalog_backend,
                category=ex.category.name,
                error=str(ex),
            )
            raise
        self._topics = tuple(catalog.load_topics())
        self._catalog_backend = catalog_backend
        logger.info("catalog_loaded", backend=catalog_backend, total_topics=len(self._topics))

        self._paginator = FeaturePaginator(self._topics)
        if initial_topic_id is not None and not self._paginator.select_by_id(initial_topic_id):
            logger.warning("initial_topic_not_found", topic_id=initial_topic_id)

        self._initialized = True
        logger.info("app_state_initialized")

    async def shutdown(self) -> None:
        """Release the paginator on shutdown."""
        self._paginator = None
        self._topics = None
        self._initialized = False
        logger.info("app_state_shutdown")

    @property
    def paginator(self) -> FeaturePaginator:
        """Get the paginator."""
        if self._paginator is None:
            raise RuntimeError("App state not initialized")
        return self._paginator

    @property
    def topics(self) -> tuple[Topic, ...]:
        """Get the loaded topic catalog."""
        if self._topics is None:
            raise RuntimeError("App state not initialized")
        return self._topics

    @property
    def catalog_backend(self) -> str | None:
        return self._catalog_backend

    def health_report(self, version: str | None = None) -> HealthReport:
        """Check the catalog and the paginator without requiring initialization."""
        return build_report(
            [check_catalog(self._topics, self._catalog_backend), check_paginator(self._paginator)],
            version=version,
        )


def get_app_state(connection: HTTPConnection) -> AppState:
    """FastAPI dependency for the application's state container."""
    return connection.app.state.app_state


def get_paginator(connection: HTTPConnection) -> FeaturePaginator:
    """FastAPI dependency for the paginator."""
    return get_app_state(connection).paginator


def get_topics(connection: HTTPConnection) -> tuple[Topic, ...]:
    """FastAPI dependency for the topic catalog."""
    return get_app_state(connection).topics
