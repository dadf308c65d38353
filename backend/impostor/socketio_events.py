from flask import current_app, request
from flask_socketio import emit
from typing import Optional

from impostor import socketio
from impostor.models import Room
from impostor.services.rooms import BroadcastCoordinator, RoomNotFound, RoomRegistry, RoundEngine


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _payload(data) -> dict:
    return data if isinstance(data, dict) else {}


def _clean_name(value) -> Optional[str]:
    if not isinstance(value, str):
        return None
    return value.strip() or None


class SessionHandler:
    """Maps inbound Socket.IO events onto the room registry and round engine.

    Each event runs as one unit under ``registry.lock``: state change,
    round checks and broadcasts finish before the next event is handled.
    Invalid or unauthorized requests are dropped without touching state.
    """

    def __init__(self, registry: RoomRegistry, engine: RoundEngine, broadcaster: BroadcastCoordinator):
        self.registry = registry
        self.engine = engine
        self.broadcaster = broadcaster

    def _ignore(self, event: str, reason: str) -> None:
        current_app.logger.debug(f"[ignored] event={event} sid={_get_sid()} reason={reason}")

    def _member_room(self, sid: str) -> Optional[Room]:
        room = self.registry.get(self.registry.room_of(sid))
        if room is None or sid not in room.members:
            return None
        return room

    def _announce_round(self, room: Room) -> None:
        self.broadcaster.round_start(room)
        current_app.logger.info(f"[round-start] room={room.id} members={room.member_count}")
        current_app.logger.debug(f"[round-start] room={room.id} impostor={room.round.impostor}")

    def _reevaluate(self, room: Room) -> None:
        """Re-run both round checks after the member set shrank."""
        if self.engine.end_check(room):
            current_app.logger.info(f"[round-end] room={room.id} members={room.member_count}")
        started = self.engine.start_check(room)
        self.broadcaster.room_detail(room)
        if started:
            self._announce_round(room)

    def _leave(self, room_id: str, sid: str) -> None:
        room = self.registry.get(room_id)
        if room is None:
            return
        was_owner = room.owner == sid
        if not self.registry.remove_member(room.id, sid):
            current_app.logger.info(f"[room-delete] room={room.id}")
            return
        current_app.logger.info(f"[room-leave] room={room.id} sid={sid} remaining={room.member_count}")
        if was_owner:
            current_app.logger.info(f"[owner-change] room={room.id} owner={room.owner}")
        self._reevaluate(room)

    def handle_connect(self, auth=None):
        sid = _get_sid()
        with self.registry.lock:
            self.registry.connections.connect(sid)
            emit('connected', {'sid': sid})
            self.broadcaster.room_list(self.registry, to=sid)
        current_app.logger.info(f"[connect] sid={sid}")

    def handle_disconnect(self, reason=None):
        sid = _get_sid()
        with self.registry.lock:
            room_id = self.registry.room_of(sid)
            if room_id is not None:
                self._leave(room_id, sid)
                self.broadcaster.room_list(self.registry)
            self.registry.connections.disconnect(sid)
        current_app.logger.info(f"[disconnect] sid={sid} room={room_id}")

    def handle_request_room_list(self, data=None):
        with self.registry.lock:
            self.broadcaster.room_list(self.registry, to=_get_sid())

    def handle_create_room(self, data=None):
        data = _payload(data)
        room_name = _clean_name(data.get('room_name'))
        player_name = _clean_name(data.get('player_name'))
        if not room_name or not player_name:
            self._ignore('create_room', 'room_name and player_name are required')
            return
        sid = _get_sid()
        with self.registry.lock:
            previous = self.registry.room_of(sid)
            room = self.registry.get(self.registry.create_room(room_name, sid, player_name))
            if previous is not None:
                self._leave(previous, sid)
            self.broadcaster.room_list(self.registry)
            self.broadcaster.room_detail(room)
            self.broadcaster.room_joined(room, sid)
        current_app.logger.info(f"[room-create] room={room.id} owner={sid}")

    def handle_join_room(self, data=None):
        data = _payload(data)
        room_id = data.get('room_id')
        player_name = _clean_name(data.get('player_name'))
        if not player_name:
            self._ignore('join_room', 'player_name is required')
            return
        sid = _get_sid()
        with self.registry.lock:
            previous = self.registry.room_of(sid)
            try:
                room = self.registry.join_room(room_id, sid, player_name)
            except RoomNotFound:
                self._ignore('join_room', f"room {room_id!r} not found")
                return
            if previous is not None and previous != room.id:
                self._leave(previous, sid)
            self.broadcaster.room_list(self.registry)
            self.broadcaster.room_detail(room)
            self.broadcaster.room_joined(room, sid)
        current_app.logger.info(f"[room-join] room={room.id} sid={sid} members={room.member_count}")

    def handle_leave_room(self, data=None):
        sid = _get_sid()
        with self.registry.lock:
            room_id = self.registry.room_of(sid)
            if room_id is None:
                self._ignore('leave_room', 'not in a room')
                return
            self._leave(room_id, sid)
            self.broadcaster.room_left(room_id, sid)
            self.broadcaster.room_list(self.registry)

    def handle_toggle_ready(self, data=None):
        sid = _get_sid()
        with self.registry.lock:
            room = self._member_room(sid)
            if room is None:
                self._ignore('toggle_ready', 'not in a room')
                return
            member = room.members[sid]
            member.ready = not member.ready
            started = self.engine.start_check(room)
            self.broadcaster.room_detail(room)
            if started:
                self._announce_round(room)

    def handle_play_again(self, data=None):
        sid = _get_sid()
        with self.registry.lock:
            room = self._member_room(sid)
            if room is None:
                self._ignore('play_again', 'not in a room')
                return
            if not room.round_active:
                self._ignore('play_again', 'no active round')
                return
            room.members[sid].play_again = True
            ended = self.engine.end_check(room)
            self.broadcaster.room_detail(room)
        if ended:
            current_app.logger.info(f"[round-end] room={room.id} members={room.member_count}")

    def handle_update_words(self, data=None):
        # Accept a bare list or {'words': [...]}
        words = data.get('words') if isinstance(data, dict) else data
        if not isinstance(words, list):
            self._ignore('update_words', 'words must be a list')
            return
        sid = _get_sid()
        with self.registry.lock:
            room_id = self.registry.room_of(sid)
            if room_id is None or not self.registry.update_word_pool(room_id, sid, words):
                self._ignore('update_words', 'only the room owner may change words')
                return
            room = self.registry.get(room_id)
            self.broadcaster.room_detail(room)
        current_app.logger.info(f"[words-update] room={room.id} words={len(room.words)}")


def register_socketio_handlers(registry: RoomRegistry, engine: RoundEngine, namespace: str = '/') -> SessionHandler:
    """Register Socket.IO event handlers bound to one registry/engine pair."""
    handler = SessionHandler(registry, engine, BroadcastCoordinator(socketio, namespace))
    socketio.on_event('connect', handler.handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handler.handle_disconnect, namespace=namespace)
    socketio.on_event('request_room_list', handler.handle_request_room_list, namespace=namespace)
    socketio.on_event('create_room', handler.handle_create_room, namespace=namespace)
    socketio.on_event('join_room', handler.handle_join_room, namespace=namespace)
    socketio.on_event('leave_room', handler.handle_leave_room, namespace=namespace)
    socketio.on_event('toggle_ready', handler.handle_toggle_ready, namespace=namespace)
    socketio.on_event('play_again', handler.handle_play_again, namespace=namespace)
    socketio.on_event('update_words', handler.handle_update_words, namespace=namespace)
    return handler
