from arcade.services.games import tictactoe


def play(state, *moves):
    for actor, index in moves:
        tictactoe.apply(state, actor, 'move', {'index': index})
    return state


def test_init_seats_first_two_players(players):
    state = tictactoe.init(players)
    assert state.x_player_id == 'p1'
    assert state.o_player_id == 'p2'
    assert state.board == [None] * 9
    assert state.turn == 'X'


def test_top_row_wins_for_x(players):
    state = play(tictactoe.init(players), ('p1', 0), ('p2', 3), ('p1', 1), ('p2', 4), ('p1', 2))
    assert state.board[:3] == ['X', 'X', 'X']
    assert state.winner == 'X'
    assert state.draw is False


def test_full_board_without_line_is_draw(players):
    # X O X / X O O / O X X
    state = play(
        tictactoe.init(players),
        ('p1', 0), ('p2', 1), ('p1', 2), ('p2', 4), ('p1', 3),
        ('p2', 5), ('p1', 7), ('p2', 6), ('p1', 8),
    )
    assert state.winner is None
    assert state.draw is True


def test_out_of_turn_move_is_ignored(players):
    state = tictactoe.init(players)
    before = state.to_dict()
    assert tictactoe.apply(state, 'p2', 'move', {'index': 0}) is None
    assert state.to_dict() == before


def test_spectator_cannot_move(players):
    state = tictactoe.init(players)
    assert tictactoe.apply(state, 'p3', 'move', {'index': 0}) is None
    assert state.board == [None] * 9


def test_occupied_cell_is_ignored(players):
    state = play(tictactoe.init(players), ('p1', 4))
    before = state.to_dict()
    assert tictactoe.apply(state, 'p2', 'move', {'index': 4}) is None
    assert state.to_dict() == before


def test_malformed_payloads_are_ignored(players):
    state = tictactoe.init(players)
    for payload in (None, {}, {'index': 9}, {'index': -1}, {'index': '3'}, {'index': True}):
        assert tictactoe.apply(state, 'p1', 'move', payload) is None
    assert state.board == [None] * 9


def test_no_moves_after_win(players):
    state = play(tictactoe.init(players), ('p1', 0), ('p2', 3), ('p1', 1), ('p2', 4), ('p1', 2))
    assert tictactoe.apply(state, 'p2', 'move', {'index': 5}) is None
