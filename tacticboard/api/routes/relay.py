"""Real-time board event relay over WebSocket."""

import json
import logging

from fastapi import APIRouter, Depends, WebSocket

from ...services.relay import ConnectionManager, get_connection_manager

logger = logging.getLogger(__name__)

router = APIRouter()


@router.websocket("/ws")
async def board_events(
    websocket: WebSocket,
    manager: ConnectionManager = Depends(get_connection_manager),
):
    """Relay ``move_circle`` and ``path_draw`` events to all other clients."""
    await manager.connect(websocket)
    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break

            text = message.get("text")
            if text is None:
                logger.debug("Ignoring binary frame")
                continue
            try:
                frame = json.loads(text)
            except ValueError:
                logger.debug("Ignoring non-JSON frame")
                continue
            await manager.relay(websocket, frame)
    finally:
        manager.disconnect(websocket)
