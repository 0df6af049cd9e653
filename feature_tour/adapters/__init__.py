"""Adapters for topic sources.

This module contains implementations of the TopicCatalog protocol.
"""

from feature_tour.adapters.factory import create_catalog
from feature_tour.adapters.memory_catalog import MemoryTopicCatalog
from feature_tour.adapters.static_catalog import SHOWCASE_TOPICS, StaticTopicCatalog

__all__ = [
    "MemoryTopicCatalog",
    "SHOWCASE_TOPICS",
    "StaticTopicCatalog",
    "create_catalog",
]
