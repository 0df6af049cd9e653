"""Tests for the exception hierarchy."""

import pytest

from feature_tour.adapters.memory_catalog import MemoryTopicCatalog
from feature_tour.core.config import Settings
from feature_tour.core.errors import (
    CatalogError,
    ConfigurationError,
    ErrorCategory,
    FeatureTourError,
)
from feature_tour.core.topics import Topic


class TestFeatureTourError:
    """Tests for FeatureTourError and its subclasses."""

    def test_categories_come_from_the_class(self) -> None:
        assert FeatureTourError("x").category == ErrorCategory.UNKNOWN
        assert CatalogError("x").category == ErrorCategory.INVALID_INPUT
        assert ConfigurationError("x").category == ErrorCategory.CONFIGURATION

    def test_keeps_original_error(self) -> None:
        original = ValueError("bad value")
        error = ConfigurationError("API_PORT must be an integer", original_error=original)
        assert str(error) == "API_PORT must be an integer"
        assert error.original_error is original

    def test_subclasses_share_base(self) -> None:
        assert isinstance(CatalogError("x"), FeatureTourError)
        assert isinstance(ConfigurationError("x"), FeatureTourError)


class TestRaisedCategories:
    """The categories carried by errors raised from real code paths."""

    def test_duplicate_topic_is_invalid_input(self) -> None:
        topic = Topic(id="a", title="A", summary="")
        with pytest.raises(CatalogError) as excinfo:
            MemoryTopicCatalog([topic, topic])
        assert excinfo.value.category is ErrorCategory.INVALID_INPUT

    def test_bad_port_is_configuration(self) -> None:
        with pytest.raises(ConfigurationError) as excinfo:
            Settings.from_env({"API_PORT": "eighty"})
        assert excinfo.value.category is ErrorCategory.CONFIGURATION
        assert isinstance(excinfo.value.original_error, ValueError)
