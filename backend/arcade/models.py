import threading
from dataclasses import dataclass, field
from typing import Any, List, Optional

# Room status
LOBBY = 'LOBBY'
PLAYING = 'PLAYING'

# Game types
TICTACTOE = 'TICTACTOE'
SNAKE = 'SNAKE'
GOOSE = 'GOOSE'
ULTIMATE = 'ULTIMATE'
LUDO = 'LUDO'
GAME_TYPES = (TICTACTOE, SNAKE, GOOSE, ULTIMATE, LUDO)


@dataclass
class Player:
    id: str
    username: str
    color: str
    score: int = 0
    is_host: bool = False

    def to_dict(self):
        return {
            'id': self.id,
            'username': self.username,
            'score': self.score,
            'isHost': self.is_host,
            'color': self.color,
        }


class Countdown:
    """Cancellation handle for one run of a room's wall-clock loop."""

    def __init__(self):
        self.started = False
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


@dataclass
class Room:
    id: str
    players: List[Player] = field(default_factory=list)
    status: str = LOBBY
    game_type: str = TICTACTOE
    game_state: Any = None
    clock: Optional[Countdown] = field(default=None, repr=False)
    # Every read or write of this room's state happens under this lock
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)

    def find_player(self, player_id) -> Optional[Player]:
        return next((p for p in self.players if p.id == player_id), None)

    def is_host(self, player_id) -> bool:
        player = self.find_player(player_id)
        return bool(player and player.is_host)

    def stop_clock(self):
        if self.clock is not None:
            self.clock.cancel()
            self.clock = None

    def summary(self):
        return {
            'id': self.id,
            'status': self.status,
            'gameType': self.game_type,
            'playerCount': len(self.players),
        }

    def to_dict(self):
        return {
            'id': self.id,
            'players': [p.to_dict() for p in self.players],
            'status': self.status,
            'gameType': self.game_type,
            'gameState': self.game_state.to_dict() if self.game_state is not None else None,
        }
