"""WebSocket messages for live paginator updates.

Every connected client receives the current snapshot as soon as it
connects and a new ``state`` message whenever the paginator moves. Clients
drive the paginator by sending intent messages.

Example:
    outbox = Outbox()
    subscription = paginator.subscribe(lambda s: outbox.put(create_state_event(s)))
    ...
    for reply in handle_client_message(paginator, await websocket.receive_text()):
        outbox.put(reply)
"""

import asyncio
import json
from collections import deque
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from feature_tour.api.schemas import PaginatorStateResponse
from feature_tour.core.logging import get_logger
from feature_tour.core.pagination import PaginatorState
from feature_tour.core.paginator import FeaturePaginator
from feature_tour.core.topics import Topic

logger = get_logger(__name__)


@dataclass
class WebSocketMessage:
    """A message sent over WebSocket.

    Attributes:
        type: The message type (see MessageTypes).
        payload: The message data.
        timestamp: When the message was created.
    """

    type: str
    payload: dict[str, Any]
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def to_json(self) -> str:
        """Convert to JSON string."""
        return json.dumps(
            {
                "type": self.type,
                "payload": self.payload,
                "timestamp": self.timestamp.isoformat(),
            }
        )


class MessageTypes:
    """WebSocket message type constants."""

    # Server events
    STATE = "state"
    INTENT_RESULT = "intent_result"

    # Client intents
    SELECT = "select"
    NEXT = "next"
    PREVIOUS = "previous"
    RESET = "reset"

    # System events
    ERROR = "error"
    PING = "ping"
    PONG = "pong"


INTENT_TYPES = (MessageTypes.SELECT, MessageTypes.NEXT, MessageTypes.PREVIOUS, MessageTypes.RESET)

DEFAULT_OUTBOX_SIZE = 64


class Outbox:
    """Bounded per-connection send buffer.

    At most one ``state`` message is pending at a time: a newer snapshot
    replaces the pending one in place, so a slow client skips intermediate
    positions but never sees an ack before the state that covers it. When
    the buffer is full the oldest pending reply is dropped.
    """

    def __init__(self, maxsize: int = DEFAULT_OUTBOX_SIZE) -> None:
        if maxsize < 2:
            raise ValueError("Outbox needs room for a state and a reply")
        self.maxsize = maxsize
        self.dropped = 0
        self._messages: deque[WebSocketMessage] = deque()
        self._ready = asyncio.Event()

    def __len__(self) -> int:
        return len(self._messages)

    def put(self, message: WebSocketMessage) -> None:
        """Queue a message without blocking; safe to call from a listener."""
        if message.type == MessageTypes.STATE:
            for position, pending in enumerate(self._messages):
                if pending.type == MessageTypes.STATE:
                    self._messages[position] = message
                    return

        if len(self._messages) >= self.maxsize:
            self._drop_oldest_reply()
        self._messages.append(message)
        self._ready.set()

    async def get(self) -> WebSocketMessage:
        """Wait for and remove the next message."""
        while not self._messages:
            self._ready.clear()
            await self._ready.wait()
        return self._messages.popleft()

    def _drop_oldest_reply(self) -> None:
        victim = next(
            (m for m in self._messages if m.type != MessageTypes.STATE),
            self._messages[0],
        )
        self._messages.remove(victim)
        self.dropped += 1
        logger.warning(
            "websocket_outbox_full",
            maxsize=self.maxsize,
            dropped_type=victim.type,
            dropped_total=self.dropped,
        )


def create_state_event(state: PaginatorState[Topic]) -> WebSocketMessage:
    """Create a snapshot event for a paginator state."""
    return WebSocketMessage(
        type=MessageTypes.STATE,
        payload=PaginatorStateResponse.from_state(state).model_dump(),
    )


def create_intent_result_event(intent: str, changed: bool) -> WebSocketMessage:
    """Create an acknowledgement for a client intent."""
    return WebSocketMessage(
        type=MessageTypes.INTENT_RESULT,
        payload={"intent": intent, "changed": changed},
    )


def create_error_event(
    error: str,
    code: str | None = None,
) -> WebSocketMessage:
    """Create an error event.

    Args:
        error: The error message.
        code: Optional error code.
    """
    return WebSocketMessage(
        type=MessageTypes.ERROR,
        payload={
            "error": error,
            "code": code,
        },
    )


def apply_intent(paginator: FeaturePaginator, intent: str, payload: dict[str, Any]) -> bool:
    """Run a client intent against the paginator.

    Returns:
        Whether the paginator moved.

    Raises:
        ValueError: If the intent is unknown or a select has no topic_id.
    """
    if intent == MessageTypes.NEXT:
        return paginator.advance()
    if intent == MessageTypes.PREVIOUS:
        return paginator.retreat()
    if intent == MessageTypes.RESET:
        return paginator.reset()
    if intent == MessageTypes.SELECT:
        topic_id = payload.get("topic_id")
        if not isinstance(topic_id, str):
            raise ValueError("select requires a string payload.topic_id")
        # An existing topic that is already current is not a move
        before = paginator.state
        paginator.select_by_id(topic_id)
        return paginator.state is not before
    raise ValueError(f"Unknown intent: {intent!r}")


def handle_client_message(paginator: FeaturePaginator, raw: str) -> list[WebSocketMessage]:
    """Parse and execute one client message.

    State changes reach the client through its paginator subscription; the
    returned messages are the direct replies (ack, pong or error).
    """
    try:
        message = json.loads(raw)
    except json.JSONDecodeError:
        return [create_error_event("Invalid JSON message", code="INVALID_JSON")]

    if not isinstance(message, dict):
        return [create_error_event("Message must be a JSON object", code="INVALID_MESSAGE")]

    msg_type = message.get("type")
    payload = message.get("payload") or {}
    if not isinstance(payload, dict):
        return [create_error_event("Payload must be a JSON object", code="INVALID_MESSAGE")]

    if msg_type == MessageTypes.PING:
        return [WebSocketMessage(type=MessageTypes.PONG, payload={})]

    if msg_type in INTENT_TYPES:
        try:
            changed = apply_intent(paginator, msg_type, payload)
        except ValueError as ex:
            return [create_error_event(str(ex), code="INVALID_INTENT")]
        return [create_intent_result_event(msg_type, changed)]

    logger.warning("unknown_websocket_message", type=msg_type)
    return [create_error_event(f"Unknown message type: {msg_type!r}", code="UNKNOWN_TYPE")]
