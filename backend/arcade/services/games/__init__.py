"""Game rule modules and the dispatch table over them.

Each module exposes ``init(players)`` and
``apply(state, actor_id, action, payload)``. ``apply`` returns the next
state (possibly the same object, mutated) or ``None`` when the intent is
illegal, in which case the state has not been touched. Rule modules are
pure in-memory computation: no I/O, no transport.
"""
from typing import Union

from arcade.models import GAME_TYPES, GOOSE, LUDO, SNAKE, TICTACTOE, ULTIMATE

from . import goose, ludo, snake, tictactoe, ultimate

GameState = Union[
    tictactoe.TicTacToeState,
    snake.SnakeState,
    ultimate.UltimateState,
    ludo.LudoState,
    goose.GooseState,
]

GAME_RULES = {
    TICTACTOE: tictactoe,
    SNAKE: snake,
    ULTIMATE: ultimate,
    LUDO: ludo,
    GOOSE: goose,
}

_missing = set(GAME_TYPES) - set(GAME_RULES)
if _missing:
    raise RuntimeError(f"No rule module for game types: {sorted(_missing)}")


def init_state(game_type, players) -> GameState:
    return GAME_RULES[game_type].init(players)


def apply_action(game_type, state, actor_id, action, payload):
    return GAME_RULES[game_type].apply(state, actor_id, action, payload)
