import pytest

from elorpg.game import Direction, Game, GameOver
from elorpg.keys import KEY_ESCAPE, KEY_UP
from elorpg.mapcheck import check_map, valid_path

BASIC = [
    "111111",
    "1P0C01",
    "100E01",
    "111111",
]

DOOR_WALL = [
    "11111",
    "1PEC1",
    "10001",
    "11111",
]

ENEMY = [
    "111111",
    "1PM0C1",
    "1000E1",
    "111111",
]


def make_game(rows, bonus=False):
    info = check_map([row + "\n" for row in rows], bonus)
    valid_path(info.grid, info.start, bonus)
    return Game(info, bonus)


def test_initial_state():
    game = make_game(BASIC)
    assert game.player == (1, 1)
    assert game.moves == 1
    assert game.score == 0
    assert game.direction is None
    assert make_game(BASIC, bonus=True).moves == 0


def test_direction_deltas():
    assert Direction.UP.delta == (-1, 0)
    assert Direction.from_key(ord("d")) is Direction.RIGHT
    assert Direction.from_key(KEY_UP) is Direction.UP
    assert Direction.from_key(ord("x")) is None


def test_walk_right():
    game = make_game(BASIC)
    assert game.move(Direction.RIGHT) is True
    assert game.player == (1, 2)
    assert game.moves == 2
    assert game.tile(1, 1) == "0"
    assert game.tile(1, 2) == "P"
    assert game.direction is Direction.RIGHT


def test_wall_blocks():
    game = make_game(BASIC)
    assert game.move(Direction.UP) is False
    assert game.player == (1, 1)
    assert game.moves == 1
    assert game.direction is None


def test_collect():
    game = make_game(BASIC)
    game.move(Direction.RIGHT)
    game.move(Direction.RIGHT)
    assert game.score == 1
    assert game.tile(1, 3) == "P"


def test_win_after_collecting():
    game = make_game(BASIC)
    game.move(Direction.RIGHT)
    game.move(Direction.RIGHT)
    with pytest.raises(GameOver) as excinfo:
        game.move(Direction.DOWN)
    assert excinfo.value.won is True
    assert excinfo.value.message == "YOU WON!"


def test_locked_door_jumped():
    game = make_game(BASIC)
    game.move(Direction.DOWN)
    game.move(Direction.RIGHT)
    moves = game.moves
    assert game.move(Direction.RIGHT) is True
    assert game.player == (2, 4)
    assert game.tile(2, 2) == "0"
    assert game.tile(2, 3) == "e"
    assert game.moves == moves


def test_locked_door_jump_collects():
    game = make_game(DOOR_WALL)
    game.move(Direction.RIGHT)
    assert game.player == (1, 3)
    assert game.score == 1


def test_locked_door_against_wall():
    game = make_game(DOOR_WALL)
    game.move(Direction.DOWN)
    game.move(Direction.RIGHT)
    assert game.move(Direction.UP) is False
    assert game.player == (2, 2)


def test_enemy_loses():
    game = make_game(ENEMY, bonus=True)
    with pytest.raises(GameOver) as excinfo:
        game.move(Direction.RIGHT)
    assert excinfo.value.won is False
    assert excinfo.value.message == "YOU LOOSE!"


def test_footstep_message():
    game = make_game(BASIC)
    assert game.footstep_message(ord("d")) == "tu as fait 1 pas"
    assert game.footstep_message(ord("w")) is None
    assert game.footstep_message(ord("x")) is None


def test_handle_key_mandatory():
    game = make_game(BASIC)
    assert game.handle_key(ord("d")) == "tu as fait 1 pas"
    assert game.player == (1, 2)
    assert game.handle_key(ord("w")) is None


def test_handle_key_bonus_no_message():
    game = make_game(BASIC, bonus=True)
    assert game.handle_key(ord("s")) is None
    assert game.player == (2, 1)
    assert game.moves_text() == "Number of moves: 1"


def test_escape_quits():
    game = make_game(BASIC)
    with pytest.raises(GameOver) as excinfo:
        game.handle_key(KEY_ESCAPE)
    assert excinfo.value.won is None


def test_original_grid_untouched():
    info = check_map([row + "\n" for row in BASIC])
    valid_path(info.grid, info.start)
    game = Game(info)
    game.move(Direction.RIGHT)
    assert info.grid[1][1] == "P"
    assert game.tile(1, 1) == "0"