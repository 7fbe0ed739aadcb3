from dataclasses import dataclass, field
from typing import Dict, List, Optional

WAITING = 'waiting'
IN_GAME = 'in-game'
FINISHED = 'finished'

MAX_PLAYERS = 2


@dataclass
class Player:
    connection: str
    name: str

    def to_dict(self):
        # socketId is the key the web client reads
        return {
            'socketId': self.connection,
            'name': self.name,
        }


@dataclass
class Round:
    word1: str
    word2: str

    def to_dict(self):
        return {'word1': self.word1, 'word2': self.word2}


@dataclass
class Lobby:
    """A named two-player match container.

    ``pending_words`` maps a connection to the word it submitted for the
    round that has not been resolved yet.
    """

    id: str
    players: List[Player] = field(default_factory=list)
    status: str = WAITING
    rounds: List[Round] = field(default_factory=list)
    pending_words: Dict[str, str] = field(default_factory=dict)

    @property
    def is_full(self) -> bool:
        return len(self.players) >= MAX_PLAYERS

    def get_player(self, connection: str) -> Optional[Player]:
        for player in self.players:
            if player.connection == connection:
                return player
        return None

    def reset(self) -> None:
        """Return to the waiting state, dropping all round progress."""
        self.status = WAITING
        self.rounds = []
        self.pending_words = {}

    def rounds_to_list(self):
        return [r.to_dict() for r in self.rounds]

    def to_dict(self, include_rounds=False):
        data = {
            'id': self.id,
            'players': [p.to_dict() for p in self.players],
            'status': self.status,
        }
        if include_rounds:
            data['rounds'] = self.rounds_to_list()
        return data
