"""
Real-time Hunt Channel.

WebSocket endpoint carrying hunt notifications. Clients join the room of a
hunt to receive its events::

    -> {"event": "join-hunt", "hunt_id": "<id>"}
    <- {"event": "hunt-progress", "hunt_id": "<id>", "data": {"progress": 30, ...}}

Client events: ``join-hunt``, ``leave-hunt``.
Server events: ``hunt-progress``, ``hunt-ready``, ``hunt-updated``,
``hunt-error``, plus ``joined``/``left`` acknowledgements and ``error`` for
frames the server cannot handle.
"""

import json
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from scavenger_hunt_ai.core.logging_config import get_logger
from scavenger_hunt_ai.server.core.constant import WEBSOCKET_PATH
from scavenger_hunt_ai.server.services.notifier import (
    JOIN_HUNT,
    LEAVE_HUNT,
    HuntNotifier,
    get_notifier,
)

logger = get_logger(__name__)
router = APIRouter()


def _error_frame(message: str) -> Dict[str, Any]:
    return {"event": "error", "hunt_id": None, "data": {"message": message}}


async def _receive_text(websocket: WebSocket) -> Optional[str]:
    """Receive the next frame as text; ``None`` for frames that are not UTF-8."""
    message = await websocket.receive()
    if message["type"] == "websocket.disconnect":
        raise WebSocketDisconnect(message.get("code", 1000))
    if message.get("text") is not None:
        return message["text"]
    data = message.get("bytes")
    if data is None:
        return None
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return None


@router.websocket(WEBSOCKET_PATH)
async def hunt_channel(websocket: WebSocket, notifier: HuntNotifier = Depends(get_notifier)):
    """Handle one client connection until it disconnects."""
    await websocket.accept()
    logger.debug("WebSocket client connected")
    try:
        while True:
            raw = await _receive_text(websocket)
            if raw is None:
                await websocket.send_json(_error_frame("Frame must be UTF-8 text"))
                continue
            try:
                frame = json.loads(raw)
            except json.JSONDecodeError:
                await websocket.send_json(_error_frame("Malformed JSON frame"))
                continue
            if not isinstance(frame, dict):
                await websocket.send_json(_error_frame("Frame must be a JSON object"))
                continue

            event = frame.get("event")
            hunt_id = frame.get("hunt_id")
            if event not in (JOIN_HUNT, LEAVE_HUNT):
                await websocket.send_json(_error_frame(f"Unknown event: {event}"))
                continue
            if not isinstance(hunt_id, str) or not hunt_id:
                await websocket.send_json(_error_frame("hunt_id is required"))
                continue

            if event == JOIN_HUNT:
                notifier.join(websocket, hunt_id)
                await websocket.send_json({"event": "joined", "hunt_id": hunt_id, "data": {}})
            else:
                notifier.leave(websocket, hunt_id)
                await websocket.send_json({"event": "left", "hunt_id": hunt_id, "data": {}})
    except WebSocketDisconnect:
        logger.debug("WebSocket client disconnected")
    finally:
        notifier.disconnect(websocket)
