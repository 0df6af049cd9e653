"""Catalog protocol for loading topics.

Implementations can read from code, a database or anything else; the
paginator only needs the ordered sequence of topics.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from feature_tour.core.topics import Topic


@runtime_checkable
class TopicCatalog(Protocol):
    """Source of the ordered topic catalog."""

    def load_topics(self) -> Sequence[Topic]:
        """Return every topic in display order.

        Raises:
            CatalogError: If the catalog content breaks its invariants.
        """
        ...
