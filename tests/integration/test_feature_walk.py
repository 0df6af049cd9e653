"""End-to-end walk through a five-topic catalog over HTTP and WebSocket."""

import asyncio
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from feature_tour.api.app import create_app
from feature_tour.api.dependencies import AppState
from feature_tour.core.config import Settings
from feature_tour.core.topics import Topic


@pytest.fixture
def walk_state(sample_topics: list[Topic]) -> AppState:
    state = AppState()
    asyncio.run(state.initialize(catalog_backend="memory", topics=sample_topics))
    return state


@pytest.fixture
def walk_client(walk_state: AppState) -> Generator[TestClient, None, None]:
    app = create_app(settings=Settings(app_version="test"), app_state=walk_state)
    with TestClient(app) as client:
        yield client


def _index(client: TestClient) -> int:
    return client.get("/paginator").json()["current_index"]


class TestFeatureWalk:
    def test_scenario(self, walk_client: TestClient):
        data = walk_client.post("/paginator/select/t2").json()["state"]
        assert data["current_index"] == 2
        assert data["current_topic"]["id"] == "t2"
        assert data["can_retreat"] and data["can_advance"]

        assert walk_client.post("/paginator/next").json()["state"]["current_index"] == 3

        data = walk_client.post("/paginator/next").json()["state"]
        assert data["current_index"] == 4
        assert data["can_advance"] is False

        assert walk_client.post("/paginator/next").json()["changed"] is False
        assert _index(walk_client) == 4

        assert walk_client.post("/paginator/select/unknown").json()["changed"] is False
        assert _index(walk_client) == 4

        for _ in range(4):
            assert walk_client.post("/paginator/previous").json()["changed"] is True
        data = walk_client.get("/paginator").json()
        assert data["current_index"] == 0
        assert data["can_retreat"] is False

        assert walk_client.post("/paginator/previous").json()["changed"] is False
        assert _index(walk_client) == 0

    def test_http_intents_reach_websocket_observers(self, walk_client: TestClient):
        with walk_client.websocket_connect("/ws/paginator") as first, walk_client.websocket_connect(
            "/ws/paginator"
        ) as second:
            assert first.receive_json()["payload"]["current_index"] == 0
            assert second.receive_json()["payload"]["current_index"] == 0

            walk_client.post("/paginator/select/t3")

            assert first.receive_json()["payload"]["current_index"] == 3
            assert second.receive_json()["payload"]["current_index"] == 3

            # One client's intent is seen by the other
            first.send_json({"type": "previous"})
            assert first.receive_json()["payload"]["current_index"] == 2
            assert first.receive_json()["type"] == "intent_result"
            assert second.receive_json()["payload"]["current_index"] == 2
