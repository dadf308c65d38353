from typing import Optional

from impostor.models import Room


class BroadcastCoordinator:
    """Builds outbound payloads and decides who receives them.

    Recipients come from the room registry rather than transport-side
    Socket.IO rooms, so a member only ever hears about the room it is
    registered in.
    """

    def __init__(self, socketio, namespace: str = '/'):
        self.socketio = socketio
        self.namespace = namespace

    def _emit(self, event: str, payload, to: Optional[str] = None) -> None:
        if to is None:
            self.socketio.emit(event, payload, namespace=self.namespace)
        else:
            self.socketio.emit(event, payload, to=to, namespace=self.namespace)

    def room_list(self, registry, to: Optional[str] = None) -> None:
        """Room summaries to every connection, or just ``to``."""
        self._emit('room_list', registry.summaries(), to=to)

    def room_detail(self, room: Room) -> None:
        payload = room.to_dict()
        for sid in list(room.members):
            self._emit('room_data', payload, to=sid)

    def round_start(self, room: Room) -> None:
        # Personalised per member; the impostor never receives the word
        if room.round is None:
            return
        for sid in list(room.members):
            is_impostor = sid == room.round.impostor
            self._emit('round_start', {
                'word': None if is_impostor else room.round.word,
                'is_impostor': is_impostor,
            }, to=sid)

    def room_joined(self, room: Room, sid: str) -> None:
        self._emit('joined_room', {'room_id': room.id, 'room_name': room.name}, to=sid)

    def room_left(self, room_id: str, sid: str) -> None:
        self._emit('left_room', {'room_id': room_id}, to=sid)
