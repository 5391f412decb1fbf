"""Loading and validating .ber maps."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, MutableSequence, Optional, Sequence

from .keys import is_valid_char

Grid = list[list[str]]
Position = tuple[int, int]


class MapError(ValueError):
    """Raised when a map file is missing, malformed or unplayable."""


@dataclass
class MapInfo:
    """A validated map: its grid of characters, the player start and collectible count."""

    grid: Grid
    start: Position
    collectibles: int

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0


def check_extension(path: str | Path) -> Path:
    """Check that the first ".ber" in the path ends it; return the path."""
    text = str(path)
    pos = text.find(".ber")
    if pos == -1 or len(text) - pos > 4:
        raise MapError("The map is not a .ber file")
    return Path(path)


def _split_lines(text: str) -> list[str]:
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def read_map(path: str | Path) -> list[str]:
    """Read a map file into its lines, each keeping its newline."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError("Map is invalid") from exc
    if not text:
        raise MapError("Map is invalid")
    return _split_lines(text)


def count_elements(grid: Iterable[Sequence[str]]) -> tuple[int, int, int]:
    """Count (collectibles, players, exits), skipping the first column of each row."""
    collectibles = players = exits = 0
    for row in grid:
        for ch in row[1:]:
            if ch == "C":
                collectibles += 1
            elif ch == "P":
                players += 1
            elif ch == "E":
                exits += 1
    return collectibles, players, exits


def _check_border(rows: Sequence[str], cols: int) -> None:
    closed = (
        cols >= 3
        and set(rows[0]) <= {"1"}
        and set(rows[-1]) <= {"1"}
        and all(row[0] == "1" and row[cols - 1] == "1" for row in rows[1:])
    )
    if not closed:
        raise MapError("The map must be surrounded by walls!")


def _check_chars(rows: Sequence[str], bonus: bool) -> Optional[Position]:
    start = None
    for r, row in enumerate(rows):
        for c, ch in enumerate(row):
            if ch != "1" and not is_valid_char(ch, bonus):
                raise MapError("Invalid character in the map")
            if ch == "P":
                start = (r, c)
    return start


def check_map(lines: Sequence[str], bonus: bool = False) -> MapInfo:
    """Validate the shape, border, characters and elements of a map."""
    lines = list(lines)
    if not lines:
        raise MapError("Map is invalid")
    cols = len(lines[0]) - 1
    rows = [line.split("\n", 1)[0] for line in lines]
    if any(len(row) != cols for row in rows):
        raise MapError("The map is not a rectangle!")
    _check_border(rows, cols)
    start = _check_chars(rows, bonus)
    collectibles, players, exits = count_elements(rows)
    if collectibles < 1 or players < 1 or exits < 1 or start is None:
        raise MapError("Some elements of the game are missing")
    if players > 1 or exits > 1:
        raise MapError("There is a duplicate element on the map")
    return MapInfo([list(row) for row in rows], start, collectibles)


_MARKS = {"0": "2", "C": "c", "M": "m", "E": "e"}


def flood_fill(grid: MutableSequence[MutableSequence[str]], start: Position,
               bonus: bool = False) -> frozenset[Position]:
    """Mark every cell reachable from start and return the reached positions.

    Floor becomes '2', collectibles 'c', enemies 'm' and the exit 'e'. The
    exit is reached but not walked through.
    """
    seen = {start}
    stack = [start]
    while stack:
        row, col = stack.pop()
        ch = grid[row][col]
        grid[row][col] = _MARKS.get(ch, ch)
        if ch == "E":
            continue
        for nr, nc in ((row, col + 1), (row, col - 1), (row + 1, col), (row - 1, col)):
            if (nr, nc) in seen or not (0 <= nr < len(grid) and 0 <= nc < len(grid[nr])):
                continue
            if is_valid_char(grid[nr][nc], bonus):
                seen.add((nr, nc))
                stack.append((nr, nc))
    return frozenset(seen)


def valid_path(grid: MutableSequence[MutableSequence[str]], start: Position,
               bonus: bool = False) -> None:
    """Flood the grid from start and fail if a collectible or the exit is unreachable."""
    flood_fill(grid, start, bonus)
    if any(ch in ("C", "E") for row in grid for ch in row):
        raise MapError("No valid path in the map")


def load_map(path: str | Path, bonus: bool = False) -> MapInfo:
    """Read, validate and flood a map file; the returned grid carries the marks."""
    check_extension(path)
    info = check_map(read_map(path), bonus)
    valid_path(info.grid, info.start, bonus)
    return info