import threading
from typing import Callable, Dict, List, Optional

from impostor.models import Member, Room, generate_room_code, normalize_room_code
from .connections import ConnectionRegistry
from .words import normalize_word_pool


class RoomNotFound(LookupError):
    """Raised when a room code does not match any live room."""


class RoomRegistry:
    """Owns every live room, keyed by room code.

    All access goes through ``lock``; callers hold it for the whole
    mutate/check/broadcast sequence of one inbound event.
    """

    def __init__(self, connections: Optional[ConnectionRegistry] = None, code_length: int = 4,
                 max_words: int = 50, code_factory: Optional[Callable[[], str]] = None):
        self.connections = connections if connections is not None else ConnectionRegistry()
        self.max_words = max_words
        self.lock = threading.RLock()
        self._rooms: Dict[str, Room] = {}
        self._code_factory = code_factory or (lambda: generate_room_code(code_length))

    def __contains__(self, room_id) -> bool:
        return normalize_room_code(room_id) in self._rooms

    def __len__(self) -> int:
        return len(self._rooms)

    def get(self, room_id) -> Optional[Room]:
        code = normalize_room_code(room_id)
        return self._rooms.get(code) if code else None

    def room_of(self, sid: str) -> Optional[str]:
        """Room code the connection currently belongs to, if any."""
        return self.connections.room_of(sid)

    def _new_code(self) -> str:
        while True:
            code = self._code_factory()
            if code not in self._rooms:
                return code

    def create_room(self, name: str, sid: str, member_name: str) -> str:
        code = self._new_code()
        room = Room(id=code, name=name, owner=sid)
        room.members[sid] = Member(name=member_name)
        self._rooms[code] = room
        self.connections.bind(sid, code)
        return code

    def join_room(self, room_id, sid: str, member_name: str) -> Room:
        room = self.get(room_id)
        if room is None:
            raise RoomNotFound(room_id)
        # A rejoin replaces the stale entry and moves it to the end of the join order
        room.members.pop(sid, None)
        room.members[sid] = Member(name=member_name)
        self.connections.bind(sid, room.id)
        return room

    def remove_member(self, room_id, sid: str) -> bool:
        """Remove ``sid`` from the room. Returns whether the room still exists."""
        room = self.get(room_id)
        if room is None:
            return False
        room.members.pop(sid, None)
        if self.connections.room_of(sid) == room.id:
            self.connections.unbind(sid)
        if not room.members:
            del self._rooms[room.id]
            return False
        if room.owner not in room.members:
            # Earliest-joined remaining member
            room.owner = next(iter(room.members))
        return True

    def update_word_pool(self, room_id, sid: str, words) -> bool:
        room = self.get(room_id)
        if room is None or room.owner != sid:
            return False
        room.words = normalize_word_pool(words, self.max_words)
        return True

    def summaries(self) -> List[dict]:
        return [room.summary() for room in self._rooms.values()]
