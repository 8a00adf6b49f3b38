import pytest

from solong.game import Game, MoveResult
from solong.mapfile import MapError

MAP = ["1111111", "1P0C0E1", "1111111"]
EXIT_FIRST = ["1111111", "1PE0C01", "1111111"]


def test_initial_state():
    game = Game(MAP)
    assert game.player == (1, 1)
    assert game.exit == (5, 1)
    assert game.collectibles_left == MAP[1].count("C")
    assert game.moves == 0
    assert game.finished is False
    assert game.rows == MAP


def test_move_onto_floor_clears_previous_tile():
    game = Game(MAP)
    result = game.move(1, 0)
    assert result == MoveResult(moved=True, collected=False, won=False, move_number=0)
    assert game.player == (2, 1)
    assert game.tile_at(1, 1) == "0"
    assert game.moves == 1


def test_move_into_wall_is_refused():
    game = Game(MAP)
    result = game.move(-1, 0)
    assert result.moved is False
    assert result.move_number is None
    assert game.player == (1, 1)
    assert game.moves == 0
    assert game.rows == MAP


@pytest.mark.parametrize(
    "x, y, expected",
    [(0, 0, False), (2, 1, True), (3, 1, True), (-1, 0, False), (100, 1, False), (1, 9, False)],
)
def test_is_valid_position(x, y, expected):
    assert Game(MAP).is_valid_position(x, y) is expected


def test_tile_at_outside_raises():
    game = Game(MAP)
    with pytest.raises(IndexError):
        game.tile_at(-1, 0)
    with pytest.raises(IndexError):
        game.tile_at(0, len(MAP))


def test_collect_then_reach_exit_wins():
    game = Game(MAP)
    results = [game.move(1, 0) for _ in range(4)]
    assert [r.collected for r in results] == [False, True, False, False]
    assert results[-1].won is True
    assert game.finished is True
    assert game.collectibles_left == 0
    assert game.tile_at(3, 1) == "0"


def test_move_numbers_count_from_zero():
    game = Game(MAP)
    for _ in range(3):
        result = game.move(1, 0)
        assert result.move_number == game.moves - 1


def test_exit_before_collecting_does_not_win():
    game = Game(EXIT_FIRST)
    first = game.move(1, 0)
    assert first.moved is True
    assert first.won is False
    game.move(1, 0)
    assert game.tile_at(2, 1) == "E"
    assert game.move(1, 0).collected is True
    game.move(-1, 0)
    final = game.move(-1, 0)
    assert final.won is True
    assert game.player == game.exit


def test_no_moves_after_finishing():
    game = Game(MAP)
    for _ in range(4):
        game.move(1, 0)
    moves = game.moves
    assert game.move(-1, 0).moved is False
    assert game.moves == moves


def test_map_without_player_is_rejected():
    with pytest.raises(MapError):
        Game(["1111111", "100C0E1", "1111111"])


def test_empty_map_is_rejected():
    with pytest.raises(MapError):
        Game([])