import pytest

from solong.game import Direction, Game, MoveResult
from solong.gamemap import GameMap


def make_game(*rows):
    return Game(GameMap(list(rows)))


def test_direction_steps_move_player():
    game = make_game("11111", "100C1", "10P01", "10E01", "11111")
    assert game.player == (2, 2)
    game.move(Direction.UP)
    assert game.player == (2, 1)
    game.move(Direction.DOWN)
    assert game.player == (2, 2)
    game.move(Direction.LEFT)
    assert game.player == (1, 2)
    game.move(Direction.RIGHT)
    assert game.player == (2, 2)
    assert game.move_count == 4


def test_initial_state():
    game = make_game("1111111", "1P0C0E1", "1111111")
    assert game.player == (1, 1)
    assert game.collectibles == 1
    assert game.move_count == 0
    assert not game.finished


def test_move_into_wall_is_blocked():
    game = make_game("1111111", "1P0C0E1", "1111111")
    assert game.move(Direction.UP) is MoveResult.BLOCKED
    assert game.player == (1, 1)
    assert game.move_count == 0


def test_move_onto_floor():
    game = make_game("1111111", "1P0C0E1", "1111111")
    assert game.move(Direction.RIGHT) is MoveResult.MOVED
    assert game.player == (2, 1)
    assert game.move_count == 1


def test_collecting_clears_tile():
    game = make_game("1111111", "1P0C0E1", "1111111")
    game.move(Direction.RIGHT)
    game.move(Direction.RIGHT)
    assert game.collectibles == 0
    assert game.tile_at(3, 1) == "0"


def test_reaching_exit_after_collecting_wins():
    game = make_game("1111111", "1P0C0E1", "1111111")
    results = [game.move(Direction.RIGHT) for _ in range(4)]
    assert results[-1] is MoveResult.WON
    assert results[:-1] == [MoveResult.MOVED] * 3
    assert game.finished
    assert game.move_count == len(results)


def test_exit_before_collecting_is_just_a_move():
    game = make_game("1111111", "1E0P0C1", "1111111")
    game.move(Direction.LEFT)
    assert game.move(Direction.LEFT) is MoveResult.MOVED
    assert game.player == (1, 1)
    assert not game.finished


def test_no_moves_after_win():
    game = make_game("11111", "1PCE1", "11111")
    game.move(Direction.RIGHT)
    assert game.move(Direction.RIGHT) is MoveResult.WON
    with pytest.raises(RuntimeError):
        game.move(Direction.LEFT)


def test_tile_at_outside_map():
    game = make_game("111", "1P1", "111")
    with pytest.raises(IndexError):
        game.tile_at(-1, 0)
    with pytest.raises(IndexError):
        game.tile_at(0, 3)


def test_tile_at_reads_map():
    game = make_game("111", "1P1", "111")
    assert game.tile_at(1, 1) == "P"