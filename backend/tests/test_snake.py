from arcade.models import Player
from arcade.services.games import snake


def test_init_snapshots_at_most_four_players(players):
    extra = players + [Player(id='p5', username='Eve', color='#000000')]
    state = snake.init(extra)
    assert state.active_player_ids == ['p1', 'p2', 'p3', 'p4']
    assert state.positions == {'p1': 1, 'p2': 1, 'p3': 1, 'p4': 1}
    assert state.turn_player_id == 'p1'


def test_roll_moves_and_passes_turn(players, fixed_dice):
    state = snake.init(players[:2])
    fixed_dice(2)
    assert snake.apply(state, 'p1', 'roll', {}) is state
    assert state.positions['p1'] == 3
    assert state.last_roll == 2
    assert state.turn_player_id == 'p2'


def test_six_keeps_the_turn(players, fixed_dice):
    state = snake.init(players[:2])
    fixed_dice(6)
    snake.apply(state, 'p1', 'roll', {})
    assert state.positions['p1'] == 7
    assert state.turn_player_id == 'p1'


def test_overshoot_stays_put_and_passes_turn(players, fixed_dice):
    state = snake.init(players[:2])
    state.positions['p1'] = 98
    fixed_dice(5)
    snake.apply(state, 'p1', 'roll', {})
    assert state.positions['p1'] == 98
    assert state.last_roll == 5
    assert state.turn_player_id == 'p2'


def test_snakes_and_ladders_are_single_hop():
    assert snake.resolve_square(1) == 38
    assert snake.resolve_square(16) == 6
    assert snake.resolve_square(80) == 100
    assert snake.resolve_square(50) == 50


def test_landing_on_snake_head_slides_down(players, fixed_dice):
    state = snake.init(players[:2])
    state.positions['p1'] = 13
    fixed_dice(3)
    snake.apply(state, 'p1', 'roll', {})
    assert state.positions['p1'] == 6


def test_exact_hundred_wins_before_turn_rotation(players, fixed_dice):
    state = snake.init(players[:2])
    state.positions['p1'] = 97
    fixed_dice(3)
    snake.apply(state, 'p1', 'roll', {})
    assert state.winner_id == 'p1'
    assert state.turn_player_id == 'p1'
    # Finished game ignores further rolls
    assert snake.apply(state, 'p1', 'roll', {}) is None


def test_non_current_player_cannot_roll(players, fixed_dice):
    state = snake.init(players[:2])
    before = state.to_dict()
    assert snake.apply(state, 'p2', 'roll', {}) is None
    assert snake.apply(state, 'p1', 'move', {}) is None
    assert state.to_dict() == before
