"""Feature paginator: the state holder behind the tour.

The paginator owns a fixed, ordered topic catalog and the current position
in it. Views read immutable snapshots and send intents; they never touch
the state directly.

Example:
    paginator = FeaturePaginator(catalog.load_topics())

    with paginator.subscribe(render):  # render() runs now, then on changes
        paginator.select_by_id("navigation-compose")
        paginator.advance()
"""

from collections.abc import Callable, Sequence
from types import TracebackType

from feature_tour.core.logging import get_logger
from feature_tour.core.pagination import PaginationController, PaginatorState
from feature_tour.core.topics import Topic, validate_catalog

logger = get_logger(__name__)

StateListener = Callable[[PaginatorState[Topic]], None]


class Subscription:
    """Handle returned by FeaturePaginator.subscribe.

    Usable as a context manager; leaving the block unsubscribes.
    """

    def __init__(self, paginator: "FeaturePaginator", listener: StateListener) -> None:
        self._paginator = paginator
        self._listener = listener
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def unsubscribe(self) -> None:
        """Stop receiving notifications. Safe to call more than once."""
        if self._active:
            self._active = False
            self._paginator._remove_listener(self._listener)

    close = unsubscribe

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.unsubscribe()


class FeaturePaginator:
    """Holds the current position over a topic catalog.

    Intents (``select_by_id``, ``advance``, ``retreat``, ``reset``) never
    raise. An intent that cannot apply leaves the state untouched and
    returns False.
    """

    def __init__(self, topics: Sequence[Topic], initial_index: int = 0) -> None:
        """Initialize the paginator.

        Args:
            topics: The topic catalog in display order.
            initial_index: Starting position, clamped into range.

        Raises:
            CatalogError: If topic ids are blank or not unique.
        """
        self._controller: PaginationController[Topic] = PaginationController()
        self._state = self._controller.initial_state(validate_catalog(topics), initial_index)
        self._listeners: list[StateListener] = []

        logger.debug(
            "paginator_created",
            total_topics=self._state.total_items,
            current_index=self._state.current_index,
        )

    @property
    def state(self) -> PaginatorState[Topic]:
        """The current snapshot."""
        return self._state

    @property
    def current_topic(self) -> Topic | None:
        return self._state.current_item

    @property
    def topics(self) -> tuple[Topic, ...]:
        return self._state.items

    def select_by_id(self, topic_id: str) -> bool:
        """Jump to the first topic whose id equals ``topic_id``.

        Returns:
            True if the topic exists (the index now points at it), False
            if no topic has that id.
        """
        index = self._controller.find_index(self._state, lambda topic: topic.id == topic_id)
        if index is None:
            logger.debug("intent_ignored", intent="select", reason="unknown_topic", topic_id=topic_id)
            return False
        self._apply("select", self._controller.go_to_index(self._state, index))
        return True

    def advance(self) -> bool:
        """Move to the next topic. Returns False at the last topic."""
        if not self._state.has_next:
            logger.debug("intent_ignored", intent="advance", reason="at_last_topic")
            return False
        return self._apply("advance", self._controller.next_page(self._state))

    def retreat(self) -> bool:
        """Move to the previous topic. Returns False at the first topic."""
        if not self._state.has_prev:
            logger.debug("intent_ignored", intent="retreat", reason="at_first_topic")
            return False
        return self._apply("retreat", self._controller.prev_page(self._state))

    def reset(self) -> bool:
        """Jump back to the first topic. Returns False if already there."""
        return self._apply("reset", self._controller.go_to_index(self._state, 0))

    def subscribe(self, listener: StateListener) -> Subscription:
        """Register ``listener`` for state changes.

        The listener is called immediately with the current snapshot, then
        once per change. Ignored intents do not notify.
        """
        self._listeners.append(listener)
        subscription = Subscription(self, listener)
        self._notify_one(listener, self._state)
        return subscription

    @property
    def subscriber_count(self) -> int:
        return len(self._listeners)

    def _remove_listener(self, listener: StateListener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def _apply(self, intent: str, new_state: PaginatorState[Topic]) -> bool:
        if new_state is self._state:
            return False

        self._state = new_state
        current = new_state.current_item
        logger.info(
            "paginator_moved",
            intent=intent,
            current_index=new_state.current_index,
            topic_id=current.id if current else None,
        )

        # Copy so listeners may unsubscribe while being notified
        for listener in list(self._listeners):
            if self._state is not new_state:
                # A listener moved the paginator; the nested call already
                # delivered the newer snapshot to everyone
                break
            self._notify_one(listener, new_state)
        return True

    def _notify_one(self, listener: StateListener, state: PaginatorState[Topic]) -> None:
        try:
            listener(state)
        except Exception:
            logger.exception("listener_failed", current_index=state.current_index)
