from dataclasses import dataclass, field
from typing import Dict, List, Optional

from . import randomizer

MAX_PLAYERS = 4
START_SQUARE = 1
FINAL_SQUARE = 100

# head -> tail
SNAKES = {16: 6, 47: 26, 49: 11, 56: 53, 62: 19, 64: 60, 87: 24, 93: 73, 95: 75, 98: 78}
# foot -> top
LADDERS = {1: 38, 4: 14, 9: 31, 21: 42, 28: 84, 36: 44, 51: 67, 71: 91, 80: 100}


@dataclass
class SnakeState:
    positions: Dict[str, int] = field(default_factory=dict)
    turn_player_id: Optional[str] = None
    active_player_ids: List[str] = field(default_factory=list)
    last_roll: Optional[int] = None
    winner_id: Optional[str] = None

    def to_dict(self):
        return {
            'positions': dict(self.positions),
            'turnPlayerId': self.turn_player_id,
            'activePlayerIds': list(self.active_player_ids),
            'lastRoll': self.last_roll,
            'winnerId': self.winner_id,
        }


def init(players):
    active = [p.id for p in players[:MAX_PLAYERS]]
    return SnakeState(
        positions={pid: START_SQUARE for pid in active},
        turn_player_id=active[0] if active else None,
        active_player_ids=active,
    )


def resolve_square(square):
    """Apply at most one snake, then at most one ladder, to a landing square."""
    square = SNAKES.get(square, square)
    return LADDERS.get(square, square)


def apply(state, actor_id, action, payload):
    if action != 'roll' or state.winner_id:
        return None
    if actor_id is None or state.turn_player_id != actor_id:
        return None

    roll = randomizer.roll_die()
    state.last_roll = roll

    target = state.positions[actor_id] + roll
    # Overshooting the final square forfeits the move
    if target <= FINAL_SQUARE:
        target = resolve_square(target)
        state.positions[actor_id] = target
        if target == FINAL_SQUARE:
            state.winner_id = actor_id
            return state

    if roll != 6:
        order = state.active_player_ids
        state.turn_player_id = order[(order.index(actor_id) + 1) % len(order)]
    return state
