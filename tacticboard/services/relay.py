"""WebSocket fan-out for board cursor and drawing events."""

import logging
from typing import Any, Dict, List, Optional

from fastapi import WebSocket

logger = logging.getLogger(__name__)

# Inbound event name -> event name broadcast to the other peers
RELAYED_EVENTS: Dict[str, str] = {
    "move_circle": "update_circle",
    "path_draw": "path_draw",
}


class ConnectionManager:
    """Tracks connected board clients and relays their events."""

    def __init__(self):
        self.active_connections: List[WebSocket] = []

    async def connect(self, websocket: WebSocket):
        await websocket.accept()
        self.active_connections.append(websocket)
        logger.info(f"Client connected ({len(self.active_connections)} active)")

    def disconnect(self, websocket: WebSocket):
        if websocket in self.active_connections:
            self.active_connections.remove(websocket)
            logger.info(f"Client disconnected ({len(self.active_connections)} active)")

    async def broadcast(self, message: dict, exclude: Optional[WebSocket] = None) -> int:
        """Send ``message`` to every peer except ``exclude``.

        Peers whose send fails are dropped; delivery to the rest continues.
        Returns the number of peers reached.
        """
        delivered = 0
        for connection in list(self.active_connections):
            if connection is exclude:
                continue
            try:
                await connection.send_json(message)
                delivered += 1
            except Exception as e:
                logger.warning(f"Dropping peer after failed send: {e}")
                self.disconnect(connection)
        return delivered

    async def relay(self, sender: WebSocket, frame: Any) -> bool:
        """Forward a client frame ``{"event", "data"}`` to the other peers."""
        if not isinstance(frame, dict):
            logger.debug(f"Ignoring non-object frame: {frame!r}")
            return False

        event = frame.get("event")
        if event == "ping":
            await sender.send_json({"event": "pong"})
            return True

        outbound = RELAYED_EVENTS.get(event) if isinstance(event, str) else None
        if outbound is None:
            logger.debug(f"Ignoring unknown event: {event!r}")
            return False

        await self.broadcast({"event": outbound, "data": frame.get("data")}, exclude=sender)
        return True


manager = ConnectionManager()


def get_connection_manager() -> ConnectionManager:
    return manager
