import math
from dataclasses import dataclass, field
from typing import List, Optional

from . import randomizer
from .board import payload_number

DUCK = 'DUCK'
GOOSE = 'GOOSE'
GEESE = 'GEESE'
ALIVE = 'ALIVE'
DEAD = 'DEAD'

DURATION_SEC = 60
ARENA_MIN = 10.0
ARENA_MAX = 590.0
SPAWN_MIN = 50.0
SPAWN_MAX = 550.0
KILL_RADIUS = 50.0
# Per-message movement cap on each axis
MAX_STEP = 5.0


@dataclass
class GoosePlayer:
    id: str
    username: str
    color: str
    role: str
    x: float
    y: float
    status: str = ALIVE

    def to_dict(self):
        return {
            'id': self.id,
            'username': self.username,
            'color': self.color,
            'role': self.role,
            'status': self.status,
            'x': self.x,
            'y': self.y,
        }


@dataclass
class GooseState:
    players: List[GoosePlayer] = field(default_factory=list)
    time_left: int = DURATION_SEC
    winner: Optional[str] = None

    def to_dict(self):
        return {
            'players': [p.to_dict() for p in self.players],
            'timeLeft': self.time_left,
            'winner': self.winner,
        }

    def find(self, player_id):
        return next((p for p in self.players if p.id == player_id), None)


def init(players):
    duck = randomizer.pick_index(len(players)) if players else None
    return GooseState(time_left=DURATION_SEC, players=[
        GoosePlayer(
            id=p.id,
            username=p.username,
            color=p.color,
            role=DUCK if i == duck else GOOSE,
            x=randomizer.coordinate(SPAWN_MIN, SPAWN_MAX),
            y=randomizer.coordinate(SPAWN_MIN, SPAWN_MAX),
        )
        for i, p in enumerate(players)
    ])


def _clamp(value, low, high):
    return max(low, min(high, value))


def apply(state, actor_id, action, payload):
    player = state.find(actor_id)
    if player is None or player.status == DEAD or state.winner:
        return None

    if action == 'move':
        dx = payload_number(payload, 'dx')
        dy = payload_number(payload, 'dy')
        if dx is None or dy is None:
            return None
        player.x = _clamp(player.x + _clamp(dx, -MAX_STEP, MAX_STEP), ARENA_MIN, ARENA_MAX)
        player.y = _clamp(player.y + _clamp(dy, -MAX_STEP, MAX_STEP), ARENA_MIN, ARENA_MAX)
        return state

    if action == 'attack':
        if player.role != DUCK:
            return None
        for other in state.players:
            if other.role == GOOSE and other.status == ALIVE:
                if math.hypot(other.x - player.x, other.y - player.y) < KILL_RADIUS:
                    other.status = DEAD
        if not any(p.role == GOOSE and p.status == ALIVE for p in state.players):
            state.winner = DUCK
        return state

    return None


def tick(state):
    """Advance the countdown by one second. Returns False once nothing is left to count."""
    if state.winner or state.time_left <= 0:
        return False
    state.time_left -= 1
    if state.time_left <= 0:
        state.winner = GEESE
    return True
