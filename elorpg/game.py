"""Game state and player movement on a validated map."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .keys import KEY_ESCAPE, is_down, is_left, is_right, is_up
from .mapcheck import MapInfo

WIN_MESSAGE = "YOU WON!"
LOSE_MESSAGE = "YOU LOOSE!"


class Direction(Enum):
    """A direction of movement on the grid, valued by its (row, col) step."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value

    @classmethod
    def from_key(cls, key: int) -> Optional["Direction"]:
        """Return the direction a key moves the player, or None."""
        if is_up(key):
            return cls.UP
        if is_down(key):
            return cls.DOWN
        if is_left(key):
            return cls.LEFT
        if is_right(key):
            return cls.RIGHT
        return None


class GameOver(Exception):
    """Raised when the game ends.

    ``won`` is True for a win, False for a loss and None when the player quit.
    """

    def __init__(self, message: str, won: Optional[bool]) -> None:
        super().__init__(message)
        self.message = message
        self.won = won


class Game:
    """The state of one game: grid, player position, score and move count."""

    def __init__(self, info: MapInfo, bonus: bool = False) -> None:
        self.grid = [list(row) for row in info.grid]
        self.row, self.col = info.start
        self.collectibles = info.collectibles
        self.bonus = bonus
        self.score = 0
        self.moves = 0 if bonus else 1
        self.direction: Optional[Direction] = None

    @property
    def player(self) -> tuple[int, int]:
        return self.row, self.col

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def tile(self, row: int, col: int) -> str:
        """Return the map character at (row, col)."""
        return self.grid[row][col]

    def _ahead(self, direction: Direction, steps: int = 1) -> tuple[int, int]:
        dr, dc = direction.delta
        return self.row + dr * steps, self.col + dc * steps

    def footstep_message(self, key: int) -> Optional[str]:
        """Return the step-count line printed before a walk, or None."""
        direction = Direction.from_key(key)
        if direction is None:
            return None
        target = self.tile(*self._ahead(direction))
        if target in ("1", "e"):
            return None
        return f"tu as fait {self.moves} pas"

    def handle_key(self, key: int) -> Optional[str]:
        """React to a key press; return a footstep message if there is one.

        Escape raises GameOver with ``won`` set to None.
        """
        message = None
        direction = Direction.from_key(key)
        if direction is not None:
            if not self.bonus:
                message = self.footstep_message(key)
            self.move(direction)
        if key == KEY_ESCAPE:
            raise GameOver("", None)
        return message

    def _place_player(self, row: int, col: int) -> None:
        self.grid[self.row][self.col] = "0"
        self.grid[row][col] = "P"
        self.row, self.col = row, col

    def _jump_door(self, direction: Direction) -> bool:
        beyond = self._ahead(direction, 2)
        target = self.tile(*beyond)
        if target == "1":
            return False
        if target == "c":
            self.score += 1
        self._place_player(*beyond)
        return True

    def move(self, direction: Direction) -> bool:
        """Try to move the player one cell; return True if the player moved.

        Walking into the exit with every collectible taken raises a winning
        GameOver; walking into an enemy raises a losing one. A locked exit is
        jumped over when the cell behind it is not a wall.
        """
        target_pos = self._ahead(direction)
        target = self.tile(*target_pos)
        if target == "1":
            return False
        self.direction = direction
        if target == "c":
            self.score += 1
        elif target == "e" and self.collectibles == self.score:
            raise GameOver(WIN_MESSAGE, True)
        elif target == "m":
            raise GameOver(LOSE_MESSAGE, False)
        elif target == "e":
            return self._jump_door(direction)
        self.moves += 1
        self._place_player(*target_pos)
        return True

    def moves_text(self) -> str:
        """Return the move counter shown on screen."""
        return f"Number of moves: {self.moves}"