"""Shared pytest fixtures for feature tour tests."""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from feature_tour.api.app import create_app
from feature_tour.api.dependencies import AppState
from feature_tour.core.config import Settings
from feature_tour.core.paginator import FeaturePaginator
from feature_tour.core.topics import Topic


def make_topic(topic_id: str) -> Topic:
    """Build a minimal topic whose fields derive from its id."""
    return Topic(
        id=topic_id,
        title=f"Title {topic_id}",
        summary=f"Summary {topic_id}",
        highlights=(f"{topic_id} highlight one", f"{topic_id} highlight two"),
        code_hint=f"// {topic_id}",
    )


@pytest.fixture
def sample_topics() -> list[Topic]:
    """Provide a five-topic catalog with ids t0..t4.

    Returns:
        list[Topic]: Topics in display order.
    """
    return [make_topic(f"t{i}") for i in range(5)]


@pytest.fixture
def paginator(sample_topics: list[Topic]) -> FeaturePaginator:
    """Provide a paginator over the sample catalog, positioned at t0."""
    return FeaturePaginator(sample_topics)


@pytest.fixture
def test_settings() -> Settings:
    """Provide settings that do not depend on the process environment."""
    return Settings(environment="development", app_version="test")


@pytest.fixture
def app_state() -> AppState:
    """Provide a fresh, uninitialized app state container."""
    return AppState()


@pytest.fixture
def client(
    test_settings: Settings,
    app_state: AppState,
) -> Generator[TestClient, None, None]:
    """Provide a test client for an app serving the built-in catalog.

    The lifespan runs on entering the client, so the catalog is loaded and
    the paginator starts at the first topic.
    """
    app = create_app(settings=test_settings, app_state=app_state)
    with TestClient(app) as test_client:
        yield test_client
