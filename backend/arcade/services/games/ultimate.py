from dataclasses import dataclass, field
from typing import List, Optional

from .board import is_full, line_winner, payload_index, seat_mark

DRAWN = 'D'


@dataclass
class UltimateState:
    boards: List[List[Optional[str]]] = field(default_factory=lambda: [[None] * 9 for _ in range(9)])
    macro_board: List[Optional[str]] = field(default_factory=lambda: [None] * 9)
    # None lets the next mover pick any open sub-board
    next_board_idx: Optional[int] = None
    turn: str = 'X'
    winner: Optional[str] = None
    x_player_id: Optional[str] = None
    o_player_id: Optional[str] = None

    def to_dict(self):
        return {
            'boards': [list(b) for b in self.boards],
            'macroBoard': list(self.macro_board),
            'nextBoardIdx': self.next_board_idx,
            'turn': self.turn,
            'winner': self.winner,
            'xPlayerId': self.x_player_id,
            'oPlayerId': self.o_player_id,
        }


def init(players):
    return UltimateState(
        x_player_id=players[0].id if len(players) > 0 else None,
        o_player_id=players[1].id if len(players) > 1 else None,
    )


def is_closed(state, board_idx):
    return state.macro_board[board_idx] is not None


def apply(state, actor_id, action, payload):
    if action != 'move' or state.winner:
        return None
    if seat_mark(state, actor_id) != state.turn:
        return None
    board_idx = payload_index(payload, 'boardIdx', 9)
    cell_idx = payload_index(payload, 'cellIdx', 9)
    if board_idx is None or cell_idx is None:
        return None
    if is_closed(state, board_idx):
        return None
    if state.next_board_idx is not None and state.next_board_idx != board_idx:
        return None
    board = state.boards[board_idx]
    if board[cell_idx]:
        return None

    board[cell_idx] = state.turn

    if line_winner(board):
        state.macro_board[board_idx] = state.turn
    elif is_full(board):
        state.macro_board[board_idx] = DRAWN

    # A drawn sub-board counts toward a full macro board but never toward a line
    if line_winner(state.macro_board, ignore=(DRAWN,)):
        state.winner = state.turn
    elif is_full(state.macro_board):
        state.winner = DRAWN

    state.turn = 'O' if state.turn == 'X' else 'X'
    state.next_board_idx = None if is_closed(state, cell_idx) else cell_idx
    return state
