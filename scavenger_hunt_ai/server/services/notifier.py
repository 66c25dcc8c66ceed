"""
Real-time hunt notifications.

Keeps WebSocket connections grouped in rooms, one room per hunt
(``hunt-<id>``), and fans events out to everyone in a room.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Set

from fastapi import WebSocket
from fastapi.encoders import jsonable_encoder

from scavenger_hunt_ai.core.logging_config import get_logger

logger = get_logger(__name__)

# Events pushed by the server
HUNT_PROGRESS = "hunt-progress"
HUNT_READY = "hunt-ready"
HUNT_UPDATED = "hunt-updated"
HUNT_ERROR = "hunt-error"

# Events sent by clients
JOIN_HUNT = "join-hunt"
LEAVE_HUNT = "leave-hunt"


def room_name(hunt_id: str) -> str:
    return f"hunt-{hunt_id}"


class HuntNotifier:
    """In-memory room registry and broadcaster for hunt events."""

    def __init__(self) -> None:
        self._rooms: Dict[str, Set[WebSocket]] = {}

    def join(self, websocket: WebSocket, hunt_id: str) -> None:
        """Add a connection to the hunt's room."""
        self._rooms.setdefault(room_name(hunt_id), set()).add(websocket)
        logger.debug(f"Socket joined {room_name(hunt_id)}")

    def leave(self, websocket: WebSocket, hunt_id: str) -> None:
        """Remove a connection from the hunt's room. Unknown rooms are ignored."""
        room = room_name(hunt_id)
        members = self._rooms.get(room)
        if members is None:
            return
        members.discard(websocket)
        if not members:
            del self._rooms[room]

    def disconnect(self, websocket: WebSocket) -> None:
        """Remove a connection from every room it joined."""
        for room in list(self._rooms):
            members = self._rooms[room]
            members.discard(websocket)
            if not members:
                del self._rooms[room]

    def members(self, hunt_id: str) -> Set[WebSocket]:
        return set(self._rooms.get(room_name(hunt_id), set()))

    async def broadcast(self, hunt_id: str, event: str, data: Optional[Dict[str, Any]] = None) -> int:
        """
        Send an event to every connection in the hunt's room.

        Connections that fail to receive the frame are dropped from the room;
        the broadcast itself never fails because of them.

        Returns:
            Number of connections that received the event.
        """
        frame = jsonable_encoder({"event": event, "hunt_id": hunt_id, "data": data or {}})
        delivered = 0
        for websocket in self.members(hunt_id):
            try:
                await websocket.send_json(frame)
                delivered += 1
            except Exception as e:
                logger.warning(f"Dropping dead socket from {room_name(hunt_id)}: {e}")
                self.leave(websocket, hunt_id)
        logger.debug(f"Broadcast {event} for hunt {hunt_id} to {delivered} socket(s)")
        return delivered


notifier = HuntNotifier()


def get_notifier() -> HuntNotifier:
    """Get the process-wide notifier."""
    return notifier
