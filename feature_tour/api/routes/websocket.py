"""WebSocket route for live paginator updates.

A client receives the current snapshot on connect, then a ``state``
message whenever the paginator moves, whoever caused the move.
"""

import asyncio
from uuid import uuid4

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from feature_tour.api.dependencies import get_paginator
from feature_tour.api.websocket import (
    Outbox,
    create_state_event,
    handle_client_message,
)
from feature_tour.core.logging import connection_context, get_logger
from feature_tour.core.paginator import FeaturePaginator

logger = get_logger(__name__)

router = APIRouter(tags=["websocket"])


async def _pump(websocket: WebSocket, outbox: Outbox) -> None:
    while True:
        message = await outbox.get()
        await websocket.send_text(message.to_json())


@router.websocket("/ws/paginator")
async def paginator_websocket(
    websocket: WebSocket,
    paginator: FeaturePaginator = Depends(get_paginator),
) -> None:
    """WebSocket endpoint for paginator updates.

    Incoming message types:
        - select: Jump to ``payload.topic_id``
        - next / previous / reset: Navigation intents
        - ping: Heartbeat, answered with pong

    Outgoing message types:
        - state: Full paginator snapshot
        - intent_result: ``{"intent": ..., "changed": ...}`` after each intent
        - error: Malformed or unknown message
        - pong: Response to ping
    """
    await websocket.accept()

    with connection_context(uuid4().hex):
        # Single outbox keeps state events ahead of the ack that caused them
        outbox = Outbox()
        subscription = paginator.subscribe(lambda state: outbox.put(create_state_event(state)))
        sender = asyncio.create_task(_pump(websocket, outbox))

        logger.info("websocket_connected", subscribers=paginator.subscriber_count)

        try:
            while True:
                data = await websocket.receive_text()
                for reply in handle_client_message(paginator, data):
                    outbox.put(reply)
        except WebSocketDisconnect:
            logger.info("websocket_client_disconnected")
        except Exception as e:
            logger.exception("websocket_error", error=str(e))
        finally:
            subscription.unsubscribe()
            sender.cancel()
            await asyncio.gather(sender, return_exceptions=True)
            if outbox.dropped:
                logger.info("websocket_outbox_dropped", dropped_total=outbox.dropped)
