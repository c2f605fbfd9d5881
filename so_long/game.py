"""Game state and tile rules: moving the player, collecting, and choosing sprites.

Sprites are named after their image files: ``mino_r``/``mino_l`` for the
player, ``bg`` and ``bg1`` to ``bg6`` for floor variants, ``wall_1`` and
``wall_2`` for walls, ``door_c``/``door_o`` for the exit and ``diary`` for
collectibles.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from so_long.mapfile import COLLECTIBLE, EMPTY, EXIT, PLAYER, WALL, GameMap

RES = 32

PLAYER_RIGHT = "mino_r"
PLAYER_LEFT = "mino_l"
WALL_PLAIN = "wall_1"
WALL_FACE = "wall_2"
DOOR_CLOSED = "door_c"
DOOR_OPEN = "door_o"
COLLECTIBLE_SPRITE = "diary"

_MODULUS = 2147483647
_MULTIPLIER = 16807


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def _c_remainder(value: int, modulus: int) -> int:
    """Remainder that takes the sign of ``value``, as integer ``%`` does in C."""
    remainder = abs(value) % modulus
    return -remainder if value < 0 else remainder


def floor_variant(col: int, row: int) -> int:
    """Floor decoration for a cell: 0 for plain floor, 1 to 6 for a variant.

    The choice is a fixed pseudo-random function of the position, so the
    floor looks the same every time it is drawn.
    """
    seed = _wrap32(row * 31 + col * 37)
    seed = _c_remainder(_wrap32(_MULTIPLIER * seed), _MODULUS)
    if seed < 0:
        seed += _MODULUS
    if seed % 100 < 60:
        return 0
    return 1 + seed % 6


def wall_sprite(grid: Sequence[Sequence[str]], row: int, col: int) -> str:
    """Wall sprite for a cell: a wall face when open floor lies below it."""
    if row != len(grid) - 1:
        below = grid[row + 1][col]
        if below != WALL and below != EXIT:
            return WALL_FACE
    return WALL_PLAIN


def sprite_for(grid: Sequence[Sequence[str]], row: int, col: int) -> str | None:
    """Default sprite for the tile at ``(row, col)``, or ``None`` for no tile."""
    tile = grid[row][col]
    if tile == WALL:
        return wall_sprite(grid, row, col)
    if tile == EMPTY:
        variant = floor_variant(col, row)
        return "bg" if variant == 0 else f"bg{variant}"
    if tile == EXIT:
        return DOOR_CLOSED
    if tile == COLLECTIBLE:
        return COLLECTIBLE_SPRITE
    if tile == PLAYER:
        return PLAYER_RIGHT
    return None


class MoveOutcome(Enum):
    """Result of an attempted move."""

    BLOCKED = "blocked"
    MOVED = "moved"
    WON = "won"


class Game:
    """A game in progress on its own copy of a validated map.

    ``player`` is ``(x, y)``. ``moves`` counts completed steps; the step onto
    the open exit that wins the game is not counted.
    """

    def __init__(self, game_map: GameMap) -> None:
        self.grid = [list(row) for row in game_map.grid]
        self.width = game_map.width
        self.height = game_map.height
        self.player = game_map.player
        self.collectibles = game_map.collectibles
        self.collected = 0
        self.moves = 0
        self.victory = False
        self.exit_open = False
        self.player_sprite = PLAYER_RIGHT

    def move(self, dx: int, dy: int) -> MoveOutcome:
        """Try to step the player by ``(dx, dy)``.

        A horizontal move turns the player to face that way even when the
        step is blocked. Walls block; the exit blocks until every
        collectible has been picked up, and stepping on it then wins.
        """
        if dx < 0:
            self.player_sprite = PLAYER_LEFT
        elif dx > 0:
            self.player_sprite = PLAYER_RIGHT
        x, y = self.player
        new_x, new_y = x + dx, y + dy
        if not (0 <= new_y < len(self.grid) and 0 <= new_x < len(self.grid[new_y])):
            return MoveOutcome.BLOCKED
        target = self.grid[new_y][new_x]
        if target == WALL:
            return MoveOutcome.BLOCKED
        if target == COLLECTIBLE:
            self.collected += 1
            if self.collected == self.collectibles:
                self.exit_open = True
        if target == EXIT:
            if self.collected == self.collectibles:
                self.victory = True
                return MoveOutcome.WON
            return MoveOutcome.BLOCKED
        self.grid[new_y][new_x] = PLAYER
        self.grid[y][x] = EMPTY
        self.player = (new_x, new_y)
        self.moves += 1
        return MoveOutcome.MOVED

    def tile(self, row: int, col: int) -> str | None:
        """Sprite to draw at ``(row, col)`` in the current state of the game."""
        name = sprite_for(self.grid, row, col)
        if name == PLAYER_RIGHT:
            return self.player_sprite
        if name == DOOR_CLOSED and self.exit_open:
            return DOOR_OPEN
        return name