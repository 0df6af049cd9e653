"""In-memory topic catalog.

Serves whatever topics the caller hands it, for tests and for embedding
applications that assemble their own tour.
"""

from collections.abc import Iterable

from feature_tour.core.topics import Topic, validate_catalog


class MemoryTopicCatalog:
    """Catalog over caller-supplied topics, validated and frozen on creation."""

    def __init__(self, topics: Iterable[Topic] = ()) -> None:
        self._topics = validate_catalog(topics)

    def load_topics(self) -> tuple[Topic, ...]:
        return self._topics
