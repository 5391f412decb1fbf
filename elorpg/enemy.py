"""Random wandering of enemies on a bonus map."""

from __future__ import annotations

import random
from typing import Optional

from .game import Game, GameOver

ENEMY_LOSE_MESSAGE = "YOU LOOSE"
DEFAULT_DELAY = 20000


class EnemyController:
    """Moves one enemy at random every ``delay`` ticks.

    Enemies only walk on floor the player could reach ('2'). An enemy that
    steps towards the player ends the game.
    """

    def __init__(self, game: Game, rng: Optional[random.Random] = None,
                 delay: int = DEFAULT_DELAY) -> None:
        if delay < 1:
            raise ValueError(f"delay must be at least 1, got {delay}")
        self.game = game
        self.rng = rng if rng is not None else random.Random()
        self.delay = delay
        self.loop = 0
        self.enemies: list[tuple[int, int]] = []

    def find_enemies(self) -> list[tuple[int, int]]:
        """Collect the (row, col) of every enemy on the grid, row by row."""
        self.enemies = [
            (r, c)
            for r, row in enumerate(self.game.grid)
            for c, ch in enumerate(row)
            if ch == "m"
        ]
        return list(self.enemies)

    def step(self, horizontal: bool, offset: int, index: int) -> bool:
        """Move enemy ``index`` by ``offset`` along a row or a column.

        Returns True if the enemy moved. Raises GameOver when the player is
        in the way.
        """
        if not 0 <= index < len(self.enemies):
            return False
        row, col = self.enemies[index]
        target = (row, col + offset) if horizontal else (row + offset, col)
        ch = self.game.tile(*target)
        if ch == "2":
            self.game.grid[row][col] = "2"
            self.game.grid[target[0]][target[1]] = "m"
            self.enemies[index] = target
            return True
        if ch == "P":
            raise GameOver(ENEMY_LOSE_MESSAGE, False)
        return False

    def tick(self) -> bool:
        """Advance one loop iteration; return True if an enemy moved."""
        self.find_enemies()
        self.loop += 1
        offset = -1 if self.rng.randrange(2) == 0 else 1
        horizontal = self.rng.randrange(2) == 0
        if self.loop % self.delay != 0:
            return False
        index = self.rng.randrange(2)
        return self.step(horizontal, offset, index)