import copy
import io

import pytest

from so_long.mapfile import (
    GameMap,
    MapError,
    count_lines,
    first_line_length,
    flood_fill,
    iter_lines,
    load_map,
    parse_map,
    validate_path,
)

VALID = "11111\n1PCE1\n11111\n"

OPEN = "1111111\n1P0C0C1\n10001E1\n1111111\n"

BLOCKED = "1111111\n1P01C01\n10E1111\n1111111\n"


def _grid(text):
    return [list(row) for row in text.splitlines()]


def test_iter_lines_round_trip_with_long_line():
    text = "1" * 5000 + "\n" + "abc"
    lines = list(iter_lines(io.StringIO(text)))
    assert "".join(lines) == text
    assert lines[0] == "1" * 5000 + "\n"
    assert lines[-1] == "abc"
    assert len(lines) == count_lines(text)


def test_iter_lines_keep_newlines():
    lines = list(iter_lines(io.StringIO(VALID)))
    assert all(line.endswith("\n") for line in lines)
    assert len(lines) == count_lines(VALID)


def test_count_lines_trailing_newline_does_not_add_a_line():
    assert count_lines("11\n11") == count_lines("11\n11\n")


def test_count_lines_empty():
    assert count_lines("") == 0


def test_first_line_length():
    assert first_line_length("abc\nde") == len("abc")
    assert first_line_length("abc") == 0


def test_parse_valid_map():
    game_map = parse_map(VALID)
    rows = VALID.splitlines()
    assert game_map.grid == [list(row) for row in rows]
    assert game_map.width == len(rows[0])
    assert game_map.height == len(rows)
    assert game_map.player == (1, 1)
    assert game_map.exits == 1
    assert game_map.collectibles == VALID.count("C")


def test_parse_map_without_final_newline():
    assert parse_map(VALID.rstrip("\n")).grid == parse_map(VALID).grid


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("11111", "only has one line"),
        ("11111\n1PXC1\n11111\n", "must only contain"),
        ("11111\n0PCE1\n11111\n", "enclosed by walls"),
        ("11111\n1PCE1\n10111\n", "enclosed by walls"),
        ("11111\n1PCE11\n11111\n", "not rectangular"),
        ("11111\n1PCE\n11111\n", "not rectangular"),
        ("111111\n1PPCE1\n111111\n", "contain 1 player"),
        ("11111\n10CE1\n11111\n", "contain 1 player"),
        ("111111\n1PCEE1\n111111\n", "contain 1 exit"),
        ("11111\n1P0E1\n11111\n", "at least 1 collectible"),
        (BLOCKED, "valid path"),
        ("11111\n1PEC1\n11111\n", "valid path"),
    ],
)
def test_parse_map_errors(text, message):
    with pytest.raises(MapError, match=message):
        parse_map(text)


def test_flood_fill_reaches_everything_on_open_map():
    game_map = parse_map(OPEN)
    assert flood_fill(game_map.grid, game_map.player) == (
        game_map.collectibles,
        game_map.exits,
    )


def test_flood_fill_misses_enclosed_collectible():
    collectibles, exits = flood_fill(_grid(BLOCKED), (1, 1))
    assert collectibles < BLOCKED.count("C")
    assert exits == BLOCKED.count("E")


def test_flood_fill_leaves_grid_unchanged():
    grid = _grid(OPEN)
    before = copy.deepcopy(grid)
    flood_fill(grid, (1, 1))
    assert grid == before


def test_validate_path_rejects_unreachable():
    game_map = GameMap(
        grid=_grid(BLOCKED),
        width=7,
        height=4,
        player=(1, 1),
        exits=1,
        collectibles=1,
    )
    with pytest.raises(MapError, match="valid path"):
        validate_path(game_map)


def test_load_map_matches_parse(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text(OPEN)
    assert load_map(path) == parse_map(OPEN)


def test_load_map_rejects_extension(tmp_path):
    path = tmp_path / "level.txt"
    path.write_text(VALID)
    with pytest.raises(MapError, match="Invalid file type"):
        load_map(path)


def test_load_map_missing_file_reported_before_extension(tmp_path):
    with pytest.raises(MapError, match="Unable to read file"):
        load_map(tmp_path / "missing.txt")
    with pytest.raises(MapError, match="Unable to read file"):
        load_map(tmp_path / "missing.ber")