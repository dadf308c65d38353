"""Room domain services: registry, round engine and broadcasting.

Everything here works over in-memory state only and never blocks, so a
Socket.IO event can run the whole mutate/check/emit sequence while holding
the registry lock. Transport concerns stay in ``impostor.socketio_events``.
"""

from .connections import ConnectionRegistry
from .registry import RoomRegistry, RoomNotFound
from .engine import RoundEngine
from .broadcast import BroadcastCoordinator
from .words import FALLBACK_WORDS, normalize_word_pool

__all__ = [
    'ConnectionRegistry',
    'RoomRegistry',
    'RoomNotFound',
    'RoundEngine',
    'BroadcastCoordinator',
    'FALLBACK_WORDS',
    'normalize_word_pool',
]
