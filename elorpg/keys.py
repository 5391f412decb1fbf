"""Key symbols the game reacts to, and the map characters a player can walk on."""

from __future__ import annotations

KEY_ESCAPE = 0xFF1B
KEY_LEFT = 0xFF51
KEY_UP = 0xFF52
KEY_RIGHT = 0xFF53
KEY_DOWN = 0xFF54

_UP_KEYS = frozenset({ord("w"), ord("W"), KEY_UP})
_DOWN_KEYS = frozenset({ord("s"), ord("S"), KEY_DOWN})
_LEFT_KEYS = frozenset({ord("a"), ord("A"), KEY_LEFT})
_RIGHT_KEYS = frozenset({ord("d"), ord("D"), KEY_RIGHT})

_WALKABLE = frozenset("CE0P")
_WALKABLE_BONUS = _WALKABLE | {"M"}


def is_up(key: int) -> bool:
    """Return True for the keys that move the player up (w, W, Up)."""
    return key in _UP_KEYS


def is_down(key: int) -> bool:
    """Return True for the keys that move the player down (s, S, Down)."""
    return key in _DOWN_KEYS


def is_left(key: int) -> bool:
    """Return True for the keys that move the player left (a, A, Left)."""
    return key in _LEFT_KEYS


def is_right(key: int) -> bool:
    """Return True for the keys that move the player right (d, D, Right)."""
    return key in _RIGHT_KEYS


def is_valid_char(ch: str, bonus: bool = False) -> bool:
    """Return True for map characters that are not walls.

    Collectibles, the exit, empty floor and the player are valid; with
    ``bonus`` set, enemies ('M') are too.
    """
    return ch in (_WALKABLE_BONUS if bonus else _WALKABLE)