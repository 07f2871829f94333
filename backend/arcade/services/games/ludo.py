"""Ludo for up to four seats.

Piece positions are relative to the owning seat: ``-1`` is the base,
``0..50`` the shared loop, ``51..56`` the seat's home stretch and ``57``
home. Two pieces meet on the loop when their global cells agree, where a
seat's cell ``0`` sits 13 cells after the previous seat's.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from . import randomizer
from .board import payload_index

MAX_SEATS = 4
PIECES = 4
COLORS = ('red', 'green', 'yellow', 'blue')

BASE = -1
HOME_STRETCH = 51
FINISHED = 57
LOOP_CELLS = 52
SEAT_OFFSET = 13
SAFE_CELLS = frozenset({0, 8, 13, 21, 26, 34, 39, 47})

ROLL = 'ROLL'
MOVE = 'MOVE'


@dataclass
class LudoPlayer:
    id: str
    username: str
    color: str
    pieces: List[int] = field(default_factory=lambda: [BASE] * PIECES)

    def to_dict(self):
        return {
            'id': self.id,
            'username': self.username,
            'color': self.color,
            'pieces': list(self.pieces),
        }


@dataclass
class LudoState:
    players: List[LudoPlayer] = field(default_factory=list)
    turn: int = 0
    dice: Optional[int] = None
    phase: str = ROLL
    winners: List[int] = field(default_factory=list)

    def to_dict(self):
        return {
            'players': [p.to_dict() for p in self.players],
            'turn': self.turn,
            'dice': self.dice,
            'phase': self.phase,
            'winners': list(self.winners),
        }


def init(players):
    return LudoState(players=[
        LudoPlayer(id=p.id, username=p.username, color=COLORS[seat])
        for seat, p in enumerate(players[:MAX_SEATS])
    ])


def destination(position, roll):
    """Where a piece at ``position`` ends up after ``roll``, or None if it cannot move."""
    if position == BASE:
        return 0 if roll == 6 else None
    if position + roll <= FINISHED:
        return position + roll
    return None


def can_move(position, roll):
    return position != FINISHED and destination(position, roll) is not None


def global_cell(seat, position):
    return (position + seat * SEAT_OFFSET) % LOOP_CELLS


def is_over(state):
    return len(state.winners) >= max(1, len(state.players) - 1)


def apply(state, actor_id, action, payload):
    if not state.players or is_over(state):
        return None
    seat = state.turn
    player = state.players[seat]
    if actor_id is None or player.id != actor_id:
        return None

    if action == 'roll':
        if state.phase != ROLL:
            return None
        roll = randomizer.roll_die()
        state.dice = roll
        if any(can_move(pos, roll) for pos in player.pieces):
            state.phase = MOVE
        else:
            # No legal move passes the turn, even on a six
            _next_turn(state)
        return state

    if action == 'move':
        if state.phase != MOVE:
            return None
        piece = payload_index(payload, 'pieceIndex', PIECES)
        if piece is None:
            return None
        target = destination(player.pieces[piece], state.dice)
        if target is None:
            return None

        player.pieces[piece] = target
        if target < HOME_STRETCH:
            _capture(state, seat, target)
        if all(pos == FINISHED for pos in player.pieces):
            state.winners.append(seat)

        # Captures do not earn an extra roll; only a six does
        if state.dice == 6 and seat not in state.winners:
            state.phase = ROLL
            state.dice = None
        else:
            _next_turn(state)
        return state

    return None


def _capture(state, seat, position):
    cell = global_cell(seat, position)
    if cell in SAFE_CELLS:
        return
    for other_seat, other in enumerate(state.players):
        if other_seat == seat:
            continue
        for i, pos in enumerate(other.pieces):
            if BASE < pos < HOME_STRETCH and global_cell(other_seat, pos) == cell:
                other.pieces[i] = BASE


def _next_turn(state):
    state.phase = ROLL
    state.dice = None
    count = len(state.players)
    for step in range(1, count + 1):
        candidate = (state.turn + step) % count
        if candidate not in state.winners:
            state.turn = candidate
            return
