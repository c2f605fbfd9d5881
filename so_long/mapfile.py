"""Reading and validating ``.ber`` map files.

A map is a rectangle of tiles enclosed by walls, holding exactly one player,
exactly one exit and at least one collectible, where every collectible and
the exit can be reached from the player's start.
"""

from __future__ import annotations

import io
import os
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from so_long.strings import strrncmp

PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
WALL = "1"
EMPTY = "0"
TILES = "01CPE"

_VISITED = "V"
_CHUNK_SIZE = 4096


class MapError(ValueError):
    """Raised when a map file cannot be read or does not describe a valid map."""


@dataclass
class GameMap:
    """A validated map: its tiles, size, player start and element counts.

    ``grid`` is indexed as ``grid[row][col]``; ``player`` is ``(x, y)``,
    that is ``(col, row)``.
    """

    grid: list[list[str]]
    width: int
    height: int
    player: tuple[int, int]
    exits: int
    collectibles: int


def iter_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of ``stream``, each keeping its trailing newline.

    The last line is yielded without a newline when the stream does not end
    with one.
    """
    pending = ""
    while chunk := stream.read(_CHUNK_SIZE):
        pending += chunk
        parts = pending.split("\n")
        pending = parts.pop()
        for part in parts:
            yield part + "\n"
    if pending:
        yield pending


def count_lines(text: str) -> int:
    """Number of lines in ``text``, counting a final line without a newline."""
    if not text:
        return 0
    return text.count("\n") + (0 if text.endswith("\n") else 1)


def first_line_length(text: str) -> int:
    """Length of the first line of ``text``, or 0 when it has no newline."""
    end = text.find("\n")
    return end if end >= 0 else 0


def _row_cells(line: str) -> str:
    """The tiles of one line: everything before the newline or a NUL."""
    return line.rstrip("\n").partition("\0")[0]


def parse_map(text: str) -> GameMap:
    """Parse and validate the text of a map file."""
    height = count_lines(text)
    width = first_line_length(text)
    if width == 0:
        raise MapError("Map invalid, only has one line")

    grid: list[list[str]] = []
    players = 0
    exits = 0
    collectibles = 0
    player = (0, 0)
    for row, line in enumerate(iter_lines(io.StringIO(text))):
        cells = _row_cells(line)
        for col, tile in enumerate(cells):
            if tile not in TILES:
                raise MapError("Map must only contain '0','1','C','P','E'")
            on_border = row in (0, height - 1) or col in (0, width - 1)
            if on_border and tile != WALL:
                raise MapError("Map must be enclosed by walls '1'")
            if tile == PLAYER:
                players += 1
                player = (col, row)
            elif tile == EXIT:
                exits += 1
            elif tile == COLLECTIBLE:
                collectibles += 1
        if len(cells) != width:
            raise MapError("Map not rectangular")
        grid.append(list(cells))

    if players != 1:
        raise MapError("Map must contain 1 player")
    if exits != 1:
        raise MapError("Map must contain 1 exit")
    if collectibles < 1:
        raise MapError("Map must containt at least 1 collectible")

    game_map = GameMap(
        grid=grid,
        width=width,
        height=height,
        player=player,
        exits=exits,
        collectibles=collectibles,
    )
    validate_path(game_map)
    return game_map


def load_map(path: str | os.PathLike[str]) -> GameMap:
    """Read, parse and validate the map file at ``path``; it must end in ``.ber``."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise MapError("Unable to read file") from exc
    if strrncmp(os.fspath(path), ".ber", 4):
        raise MapError("Invalid file type, use .ber")
    return parse_map(data.decode("latin-1"))


def flood_fill(grid: Sequence[Sequence[str]], start: tuple[int, int]) -> tuple[int, int]:
    """Count the collectibles and exits reachable from ``start`` (``(x, y)``).

    Walls block movement; an exit is counted but cannot be walked through.
    ``grid`` itself is left unchanged. Returns ``(collectibles, exits)``.
    """
    cells = [list(row) for row in grid]
    collectibles = 0
    exits = 0
    pending = [start]
    while pending:
        x, y = pending.pop()
        if not (0 <= y < len(cells) and 0 <= x < len(cells[y])):
            continue
        tile = cells[y][x]
        if tile == EXIT:
            exits += 1
            cells[y][x] = _VISITED
            continue
        if tile in (WALL, _VISITED):
            continue
        if tile == COLLECTIBLE:
            collectibles += 1
        cells[y][x] = _VISITED
        pending.extend(((x + 1, y), (x, y + 1), (x - 1, y), (x, y - 1)))
    return collectibles, exits


def validate_path(game_map: GameMap) -> None:
    """Raise :class:`MapError` unless every collectible and the exit are reachable."""
    collectibles, exits = flood_fill(game_map.grid, game_map.player)
    if collectibles != game_map.collectibles or exits != game_map.exits:
        raise MapError("Map must have a valid path to win")