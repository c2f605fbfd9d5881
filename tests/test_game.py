import pytest

from so_long.game import (
    Game,
    MoveOutcome,
    floor_variant,
    sprite_for,
    wall_sprite,
)
from so_long.mapfile import parse_map

LINE_MAP = "1111111\n1P0C0E1\n1111111\n"
EXIT_LEFT_MAP = "11111\n1EPC1\n11111\n"


def make_game(text):
    return Game(parse_map(text))


def test_floor_variant_origin_is_plain():
    assert floor_variant(0, 0) == 0


def test_floor_variant_known_value():
    assert floor_variant(3, 0) == 4


@pytest.mark.parametrize("col", range(0, 40, 3))
@pytest.mark.parametrize("row", range(0, 40, 7))
def test_floor_variant_in_range(col, row):
    assert 0 <= floor_variant(col, row) <= 6


def test_floor_variant_huge_coordinates_stay_in_range():
    assert 0 <= floor_variant(100000, 90000) <= 6
    assert floor_variant(5000, 7000) == floor_variant(5000, 7000)


def test_wall_sprite_rules():
    grid = make_game(LINE_MAP).grid
    assert wall_sprite(grid, 0, 0) == "wall_1"
    assert wall_sprite(grid, 0, 2) == "wall_2"
    assert wall_sprite(grid, 0, 5) == "wall_1"
    assert wall_sprite(grid, 2, 3) == "wall_1"


def test_sprite_for_each_tile():
    grid = make_game(LINE_MAP).grid
    assert sprite_for(grid, 1, 1) == "mino_r"
    assert sprite_for(grid, 1, 3) == "diary"
    assert sprite_for(grid, 1, 5) == "door_c"
    assert sprite_for(grid, 1, 2).startswith("bg")


def test_sprite_for_unknown_tile_is_none():
    assert sprite_for([["V"]], 0, 0) is None


def test_move_onto_floor():
    game = make_game(LINE_MAP)
    assert game.move(1, 0) is MoveOutcome.MOVED
    assert game.player == (2, 1)
    assert game.grid[1][1] == "0"
    assert game.grid[1][2] == "P"
    assert game.moves == 1


def test_move_into_wall_is_blocked():
    game = make_game(LINE_MAP)
    assert game.move(0, -1) is MoveOutcome.BLOCKED
    assert game.player == (1, 1)
    assert game.moves == 0
    assert game.player_sprite == "mino_r"


def test_blocked_left_move_still_turns_player():
    game = make_game(LINE_MAP)
    assert game.move(-1, 0) is MoveOutcome.BLOCKED
    assert game.player_sprite == "mino_l"
    assert game.tile(1, 1) == "mino_l"


def test_collect_then_win():
    game = make_game(LINE_MAP)
    for _ in range(3):
        assert game.move(1, 0) is MoveOutcome.MOVED
    assert game.collected == game.collectibles
    assert game.exit_open
    assert game.tile(1, 5) == "door_o"
    assert game.move(1, 0) is MoveOutcome.WON
    assert game.victory
    assert game.moves == 3
    assert game.player == (4, 1)


def test_exit_blocks_until_collected():
    game = make_game(EXIT_LEFT_MAP)
    assert game.tile(1, 1) == "door_c"
    assert game.move(-1, 0) is MoveOutcome.BLOCKED
    assert not game.victory
    assert game.grid[1][1] == "E"
    assert game.move(1, 0) is MoveOutcome.MOVED
    assert game.exit_open
    assert game.move(-1, 0) is MoveOutcome.MOVED
    assert game.move(-1, 0) is MoveOutcome.WON


def test_game_copies_grid():
    game_map = parse_map(LINE_MAP)
    game = Game(game_map)
    game.move(1, 0)
    assert game_map.grid[1][1] == "P"
    assert game.grid[1][1] == "0"