"""Catalog factory for creating different catalog implementations.

Supported backends:
- "static": The built-in showcase catalog
- "memory": Caller-supplied topics, empty by default

Example:
    catalog = create_catalog("static")
    catalog = create_catalog("memory", topics=[Topic(id="t0", title="T0", summary="")])
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Union

from feature_tour.adapters.memory_catalog import MemoryTopicCatalog
from feature_tour.adapters.static_catalog import StaticTopicCatalog
from feature_tour.core.topics import Topic

CatalogType = Union[StaticTopicCatalog, MemoryTopicCatalog]


def create_catalog(backend: str, topics: Iterable[Topic] | None = None) -> CatalogType:
    """Create a topic catalog for the specified backend.

    Args:
        backend: "static" or "memory".
        topics: Topics for the "memory" backend. For "static" they replace
            the built-in showcase topics when given.

    Returns:
        A catalog instance of the appropriate type.

    Raises:
        ValueError: If the backend is not supported.
        CatalogError: If the supplied topics break catalog invariants.
    """
    if backend == "static":
        if topics is None:
            return StaticTopicCatalog()
        return StaticTopicCatalog(tuple(topics))

    if backend == "memory":
        return MemoryTopicCatalog(topics or ())

    raise ValueError(
        f"Unsupported backend: {backend!r}. Supported backends: 'static', 'memory'"
    )
