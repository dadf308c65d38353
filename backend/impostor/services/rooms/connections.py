from typing import Dict, Optional


class ConnectionRegistry:
    """Live Socket.IO connections and the room each one currently sits in."""

    def __init__(self):
        self._room_by_sid: Dict[str, Optional[str]] = {}

    def connect(self, sid: str) -> None:
        self._room_by_sid.setdefault(sid, None)

    def disconnect(self, sid: str) -> None:
        self._room_by_sid.pop(sid, None)

    def bind(self, sid: str, room_id: str) -> None:
        self._room_by_sid[sid] = room_id

    def unbind(self, sid: str) -> None:
        if sid in self._room_by_sid:
            self._room_by_sid[sid] = None

    def room_of(self, sid: str) -> Optional[str]:
        return self._room_by_sid.get(sid)

    def __len__(self) -> int:
        return len(self._room_by_sid)
