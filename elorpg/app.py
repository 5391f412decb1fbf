"""The playable window: sprites, drawing and the main loop."""

from __future__ import annotations

import os
import sys
import time
from pathlib import Path
from typing import Mapping, Optional, Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from .animation import DoorAnimation  # noqa: E402
from .enemy import EnemyController  # noqa: E402
from .game import Direction, Game, GameOver  # noqa: E402
from .keys import KEY_DOWN, KEY_ESCAPE, KEY_LEFT, KEY_RIGHT, KEY_UP  # noqa: E402
from .mapcheck import MapError, load_map  # noqa: E402
from .xpm import TRANSPARENT, XpmError, XpmImage, load_xpm  # noqa: E402

TITLE = "ELO RPG ADVENTURE"
TILE_SIZE = 32
FPS = 60
ENEMY_DELAY = 120

SPRITE_FILES: Mapping[str, str] = {
    "floor": "floor.xpm",
    "wall": "wall.xpm",
    "collectible": "collectible.xpm",
    "door": "door.xpm",
    "player_up": "player_up.xpm",
    "player_down": "player_down.xpm",
    "player_left": "player_left.xpm",
    "player_right": "player_right.xpm",
}

ENEMY_FILES: Mapping[str, str] = {
    "enemy_up": "enemy_up.xpm",
    "enemy_down": "enemy_down.xpm",
    "enemy_left": "enemy_left.xpm",
    "enemy_right": "enemy_right.xpm",
}

DOOR_FRAME_FILES: tuple[str, ...] = (
    "door_01.xpm", "door_02.xpm", "door_1.xpm",
    "door_2.xpm", "door_3.xpm", "door_4.xpm",
)

_PLAYER_SPRITES = {
    Direction.UP: "player_up",
    Direction.DOWN: "player_down",
    Direction.LEFT: "player_left",
    Direction.RIGHT: "player_right",
}

_KEY_MAP = {
    pygame.K_UP: KEY_UP,
    pygame.K_DOWN: KEY_DOWN,
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT,
    pygame.K_ESCAPE: KEY_ESCAPE,
}


def xpm_to_surface(image: XpmImage) -> pygame.Surface:
    """Turn a decoded XPM image into a surface with per-pixel alpha."""
    surface = pygame.Surface((image.width, image.height), pygame.SRCALPHA)
    for y, row in enumerate(image.rows):
        for x, value in enumerate(row):
            if value == TRANSPARENT:
                surface.set_at((x, y), (0, 0, 0, 0))
            else:
                surface.set_at((x, y), ((value >> 16) & 0xFF, (value >> 8) & 0xFF,
                                        value & 0xFF, 255))
    return surface


def load_sprites(directory: str | Path, bonus: bool = False) -> dict[str, pygame.Surface]:
    """Load every sprite the game needs from a directory of XPM files."""
    base = Path(directory)
    files = dict(SPRITE_FILES)
    if bonus:
        files.update(ENEMY_FILES)
        files.update({f"door_anim{i}": name for i, name in enumerate(DOOR_FRAME_FILES)})
    return {key: xpm_to_surface(load_xpm(base / name)) for key, name in files.items()}


class App:
    """Draws a game and runs its event loop in a window."""

    def __init__(self, game: Game, sprites: Mapping[str, pygame.Surface],
                 tile_size: int = TILE_SIZE) -> None:
        self.game = game
        self.sprites = sprites
        self.tile_size = tile_size
        self.animation: Optional[DoorAnimation] = None
        self.enemies: Optional[EnemyController] = None
        self._font: Optional[pygame.font.Font] = None
        if game.bonus:
            self.animation = DoorAnimation()
            self.enemies = EnemyController(game, delay=ENEMY_DELAY)

    def sprite_for(self, row: int, col: int) -> Optional[str]:
        """Return the name of the sprite drawn at a cell, or None for nothing."""
        ch = self.game.tile(row, col)
        if ch == "1":
            return "wall"
        if ch in ("0", "2"):
            return "floor"
        if ch in ("C", "c"):
            return "collectible"
        if ch == "e":
            if self.animation is not None:
                return f"door_anim{self.animation.frame}"
            return "door"
        if ch == "P":
            return _PLAYER_SPRITES.get(self.game.direction, "player_down")
        if self.game.bonus and ch in ("M", "m"):
            return "enemy_down"
        return None

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the whole map, and in bonus mode the move counter on top."""
        size = self.tile_size
        for row in range(self.game.height):
            for col in range(self.game.width):
                name = self.sprite_for(row, col)
                if name is not None:
                    surface.blit(self.sprites[name], (col * size, row * size))
        if self.game.bonus:
            for col in range(self.game.width):
                surface.blit(self.sprites["wall"], (col * size, 0))
            if not pygame.font.get_init():
                pygame.font.init()
            if self._font is None:
                self._font = pygame.font.Font(None, 20)
            text = self._font.render(self.game.moves_text(), True, (255, 255, 255))
            surface.blit(text, (20, 20))

    def run(self) -> int:
        """Open the window and play until the game ends; return the exit status."""
        pygame.init()
        try:
            size = self.tile_size
            screen = pygame.display.set_mode((self.game.width * size,
                                              self.game.height * size))
            pygame.display.set_caption(TITLE)
            clock = pygame.time.Clock()
            while True:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return 0
                    if event.type == pygame.KEYDOWN:
                        message = self.game.handle_key(_KEY_MAP.get(event.key, event.key))
                        if message:
                            print(message)
                if self.animation is not None:
                    self.animation.update(time.monotonic())
                if self.enemies is not None:
                    self.enemies.tick()
                self.draw(screen)
                pygame.display.flip()
                clock.tick(FPS)
        except GameOver as over:
            if over.message:
                print(over.message, end="")
            return 0
        finally:
            pygame.quit()


def _parse_args(argv: Sequence[str]) -> Optional[tuple[str, bool, str]]:
    bonus = False
    images = "img"
    paths = []
    args = iter(argv)
    for arg in args:
        if arg == "--bonus":
            bonus = True
        elif arg == "--images":
            images = next(args, None)
            if images is None:
                return None
        elif arg.startswith("--images="):
            images = arg.split("=", 1)[1]
        else:
            paths.append(arg)
    if len(paths) != 1:
        return None
    return paths[0], bonus, images


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play the map named on the command line: MAP.ber [--bonus] [--images DIR]."""
    parsed = _parse_args(sys.argv[1:] if argv is None else argv)
    if parsed is None:
        print("Error\nThe map is invalid")
        return 1
    path, bonus, images = parsed
    try:
        info = load_map(path, bonus)
        sprites = load_sprites(images, bonus)
    except (MapError, XpmError) as exc:
        print(f"Error\n{exc}")
        return 1
    return App(Game(info, bonus), sprites).run()