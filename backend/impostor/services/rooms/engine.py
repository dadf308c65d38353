import random
from typing import Optional, Sequence

from impostor.models import Room, Round
from .words import FALLBACK_WORDS


class RoundEngine:
    """Two-state round machine per room: Idle (``room.round is None``) and Active.

    - start check, after a readiness change: Idle -> Active when the room has
      at least ``min_players`` members and all of them are ready
    - end check, after a play-again vote: Active -> Idle when every member
      has voted; resets ``ready`` and ``play_again`` on every member

    Ready flags are left alone on start so they carry into the active round.
    """

    def __init__(self, min_players: int = 4, fallback_words: Sequence[str] = FALLBACK_WORDS,
                 rng: Optional[random.Random] = None):
        self.min_players = min_players
        self.fallback_words = tuple(fallback_words)
        self.rng = rng or random.Random()

    def start_check(self, room: Room) -> Optional[Round]:
        if room.round_active:
            return None
        if room.member_count < self.min_players or not room.all_ready():
            return None
        pool = room.words or self.fallback_words
        word = self.rng.choice(list(pool))
        impostor = self.rng.choice(list(room.members))
        room.round = Round(word=word, impostor=impostor)
        return room.round

    def end_check(self, room: Room) -> bool:
        if not room.round_active:
            return False
        if room.member_count == 0 or not room.all_voted_play_again():
            return False
        for member in room.members.values():
            member.ready = False
            member.play_again = False
        room.round = None
        return True
