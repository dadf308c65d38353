from dataclasses import dataclass, field
from typing import Dict, List, Optional
import string
import random

ROOM_CODE_ALPHABET = string.ascii_uppercase + string.digits


def generate_room_code(length=4, rng=random):
    """Generate a short room code. Uniqueness is checked by the registry."""
    return ''.join(rng.choices(ROOM_CODE_ALPHABET, k=length))


def normalize_room_code(code) -> Optional[str]:
    if not isinstance(code, str):
        return None
    code = code.strip().upper()
    return code or None


@dataclass
class Member:
    name: str
    ready: bool = False
    play_again: bool = False

    def to_dict(self, sid: str) -> dict:
        return {
            'id': sid,
            'name': self.name,
            'ready': self.ready,
            'play_again': self.play_again,
        }


@dataclass
class Round:
    word: str
    impostor: str


@dataclass
class Room:
    id: str
    name: str
    owner: str
    words: List[str] = field(default_factory=list)
    # Insertion order is join order
    members: Dict[str, Member] = field(default_factory=dict)
    round: Optional[Round] = None

    @property
    def round_active(self) -> bool:
        return self.round is not None

    @property
    def member_count(self) -> int:
        return len(self.members)

    def all_ready(self) -> bool:
        return all(m.ready for m in self.members.values())

    def all_voted_play_again(self) -> bool:
        return all(m.play_again for m in self.members.values())

    def summary(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'member_count': self.member_count,
        }

    def to_dict(self) -> dict:
        # Never includes the round's word or impostor
        return {
            'room_id': self.id,
            'name': self.name,
            'members': [m.to_dict(sid) for sid, m in self.members.items()],
            'owner': self.owner,
            'round_active': self.round_active,
            'words': list(self.words),
        }
