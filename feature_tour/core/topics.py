"""Topic records shown by the feature tour."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from feature_tour.core.errors import CatalogError


@dataclass(frozen=True)
class Topic:
    """A single page of the feature tour.

    Attributes:
        id: Identifier, unique within a catalog.
        title: Heading shown in the list and detail views.
        summary: One-line description.
        highlights: Ordered bullet points for the detail view.
        code_hint: Opaque snippet rendered verbatim.
    """

    id: str
    title: str
    summary: str
    highlights: tuple[str, ...] = field(default_factory=tuple)
    code_hint: str = ""

    def __post_init__(self) -> None:
        # Accept any iterable of highlights but store an immutable tuple
        if not isinstance(self.highlights, tuple):
            object.__setattr__(self, "highlights", tuple(self.highlights))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "title": self.title,
            "summary": self.summary,
            "highlights": list(self.highlights),
            "code_hint": self.code_hint,
        }


def validate_catalog(topics: Iterable[Topic]) -> tuple[Topic, ...]:
    """Check catalog invariants and freeze the ordering.

    Args:
        topics: Topics in display order.

    Returns:
        The topics as a tuple, order preserved.

    Raises:
        CatalogError: If an id is blank or appears more than once.
    """
    frozen = tuple(topics)
    seen: set[str] = set()
    for position, topic in enumerate(frozen):
        if not topic.id or not topic.id.strip():
            raise CatalogError(f"Topic at position {position} has a blank id")
        if topic.id in seen:
            raise CatalogError(f"Duplicate topic id: {topic.id!r}")
        seen.add(topic.id)
    return frozen
