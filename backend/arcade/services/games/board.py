"""Helpers shared by the grid games and payload validation."""
import math
from numbers import Real

WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


def line_winner(cells, ignore=()):
    """Return the mark completing any line of three, or None."""
    for a, b, c in WIN_LINES:
        mark = cells[a]
        if mark and mark not in ignore and mark == cells[b] == cells[c]:
            return mark
    return None


def is_full(cells):
    return all(cells)


def seat_mark(state, actor_id):
    if actor_id is None:
        return None
    if actor_id == state.x_player_id:
        return 'X'
    if actor_id == state.o_player_id:
        return 'O'
    return None


def payload_index(payload, key, size):
    """Integer ``payload[key]`` in ``range(size)``, or None when malformed."""
    if not isinstance(payload, dict):
        return None
    value = payload.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if not 0 <= value < size:
        return None
    return value


def payload_number(payload, key, default=0.0):
    if not isinstance(payload, dict):
        return None
    value = payload.get(key, default)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    try:
        value = float(value)
    except OverflowError:
        return None
    # NaN and infinities never describe a position change
    if not math.isfinite(value):
        return None
    return value
