from dataclasses import dataclass, field
from typing import List, Optional

from .board import is_full, line_winner, payload_index, seat_mark


@dataclass
class TicTacToeState:
    board: List[Optional[str]] = field(default_factory=lambda: [None] * 9)
    turn: str = 'X'
    winner: Optional[str] = None
    draw: bool = False
    x_player_id: Optional[str] = None
    o_player_id: Optional[str] = None

    def to_dict(self):
        return {
            'board': list(self.board),
            'turn': self.turn,
            'winner': self.winner,
            'draw': self.draw,
            'xPlayerId': self.x_player_id,
            'oPlayerId': self.o_player_id,
        }


def init(players):
    """First two players take X and O; everyone else spectates."""
    return TicTacToeState(
        x_player_id=players[0].id if len(players) > 0 else None,
        o_player_id=players[1].id if len(players) > 1 else None,
    )


def apply(state, actor_id, action, payload):
    if action != 'move' or state.winner or state.draw:
        return None
    if seat_mark(state, actor_id) != state.turn:
        return None
    index = payload_index(payload, 'index', 9)
    if index is None or state.board[index]:
        return None

    state.board[index] = state.turn
    if line_winner(state.board):
        state.winner = state.turn
    elif is_full(state.board):
        state.draw = True
    else:
        state.turn = 'O' if state.turn == 'X' else 'X'
    return state
