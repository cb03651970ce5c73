"""Ephemeral WebRTC signaling rooms: room id -> {signal type -> sdp}

State lives in process memory only; it is lost on restart and is not shared
between server processes.
"""

import threading
from typing import Any, Optional


class SignalingRooms:
    def __init__(self):
        self._rooms: dict[str, dict[str, Any]] = {}
        self._lock = threading.Lock()

    def get(self, room: str) -> Optional[dict[str, Any]]:
        """Return a copy of the room's signals, or None if nothing was posted to it."""
        with self._lock:
            signals = self._rooms.get(room)
            return dict(signals) if signals is not None else None

    def put(self, room: str, signal_type: str, sdp: Any) -> None:
        """Store sdp under signal_type, replacing any earlier signal of that type."""
        with self._lock:
            self._rooms.setdefault(room, {})[signal_type] = sdp
