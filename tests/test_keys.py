import pytest

from elorpg import keys
from elorpg.keys import is_down, is_left, is_right, is_up, is_valid_char


@pytest.mark.parametrize("char", ["w", "W"])
def test_up_letters(char):
    assert is_up(ord(char)) is True


def test_up_arrow():
    assert is_up(keys.KEY_UP) is True


@pytest.mark.parametrize("char", ["s", "S"])
def test_down_letters(char):
    assert is_down(ord(char)) is True


def test_down_arrow():
    assert is_down(keys.KEY_DOWN) is True


@pytest.mark.parametrize("char", ["a", "A"])
def test_left_letters(char):
    assert is_left(ord(char)) is True


def test_left_arrow():
    assert is_left(keys.KEY_LEFT) is True


@pytest.mark.parametrize("char", ["d", "D"])
def test_right_letters(char):
    assert is_right(ord(char)) is True


def test_right_arrow():
    assert is_right(keys.KEY_RIGHT) is True


def test_escape_is_not_a_direction():
    assert keys.KEY_ESCAPE == 0xFF1B
    assert is_up(keys.KEY_ESCAPE) is False
    assert is_down(keys.KEY_ESCAPE) is False
    assert is_left(keys.KEY_ESCAPE) is False
    assert is_right(keys.KEY_ESCAPE) is False


def test_directions_are_exclusive():
    candidates = list(range(256)) + [
        keys.KEY_UP, keys.KEY_DOWN, keys.KEY_LEFT, keys.KEY_RIGHT,
    ]
    for key in candidates:
        hits = [is_up(key), is_down(key), is_left(key), is_right(key)]
        assert sum(hits) <= 1


def test_each_direction_has_three_keys():
    candidates = list(range(256)) + list(range(0xFF00, 0xFFFF))
    ups = sorted(key for key in candidates if is_up(key))
    downs = sorted(key for key in candidates if is_down(key))
    lefts = sorted(key for key in candidates if is_left(key))
    rights = sorted(key for key in candidates if is_right(key))
    assert ups == sorted([ord("w"), ord("W"), keys.KEY_UP])
    assert downs == sorted([ord("s"), ord("S"), keys.KEY_DOWN])
    assert lefts == sorted([ord("a"), ord("A"), keys.KEY_LEFT])
    assert rights == sorted([ord("d"), ord("D"), keys.KEY_RIGHT])


@pytest.mark.parametrize("char", ["C", "E", "0", "P"])
def test_walkable_chars(char):
    assert is_valid_char(char) is True
    assert is_valid_char(char, bonus=True) is True


@pytest.mark.parametrize("char", ["1", "c", "e", "2", "\n", "X"])
def test_non_walkable_chars(char):
    assert is_valid_char(char) is False
    assert is_valid_char(char, bonus=True) is False


def test_enemy_only_valid_in_bonus():
    assert is_valid_char("M") is False
    assert is_valid_char("M", bonus=True) is True