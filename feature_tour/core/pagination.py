"""Pagination business logic - platform agnostic."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PaginatorState(Generic[T]):
    """Immutable snapshot of a paginated view.

    Flags are computed from ``items`` and ``current_index`` on access so a
    snapshot can never pair a new index with stale flags.
    """

    items: tuple[T, ...] = field(default_factory=tuple)
    current_index: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    @property
    def total_items(self) -> int:
        return len(self.items)

    @property
    def current_item(self) -> T | None:
        if 0 <= self.current_index < len(self.items):
            return self.items[self.current_index]
        return None

    @property
    def has_next(self) -> bool:
        return self.current_index < len(self.items) - 1

    @property
    def has_prev(self) -> bool:
        return self.current_index > 0


def clamp_index(index: int, total_items: int) -> int:
    """Clamp an index into ``[0, total_items - 1]``, or 0 for no items."""
    if total_items <= 0:
        return 0
    return max(0, min(index, total_items - 1))


class PaginationController(Generic[T]):
    """Pure navigation transitions over PaginatorState.

    Every method returns the same state object when the request is ignored,
    so callers can detect a no-op with an identity check.
    """

    def initial_state(self, items: Sequence[T], index: int = 0) -> PaginatorState[T]:
        """Build a state over ``items`` with ``index`` clamped into range."""
        return PaginatorState(items=tuple(items), current_index=clamp_index(index, len(items)))

    def next_page(self, state: PaginatorState[T]) -> PaginatorState[T]:
        """Move to next item, returns new state."""
        if state.has_next:
            return replace(state, current_index=state.current_index + 1)
        return state

    def prev_page(self, state: PaginatorState[T]) -> PaginatorState[T]:
        """Move to previous item, returns new state."""
        if state.has_prev:
            return replace(state, current_index=state.current_index - 1)
        return state

    def go_to_index(self, state: PaginatorState[T], index: int) -> PaginatorState[T]:
        """Jump to specific index."""
        if 0 <= index < len(state.items) and index != state.current_index:
            return replace(state, current_index=index)
        return state

    def find_index(
        self, state: PaginatorState[T], predicate: Callable[[T], bool]
    ) -> int | None:
        """Position of the first item matching ``predicate``, if any."""
        for position, item in enumerate(state.items):
            if predicate(item):
                return position
        return None
