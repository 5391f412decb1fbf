from pathlib import Path

import pytest

from elorpg.mapcheck import (
    MapError,
    check_extension,
    check_map,
    count_elements,
    flood_fill,
    load_map,
    read_map,
    valid_path,
)

VALID = "1111111\n1P0C0E1\n1111111\n"


def lines_of(text):
    return text.splitlines(keepends=True)


def write(tmp_path, text, name="level.ber"):
    path = tmp_path / name
    path.write_text(text, encoding="latin-1", newline="")
    return path


def test_check_extension_accepts_ber():
    assert check_extension("maps/level.ber") == Path("maps/level.ber")


@pytest.mark.parametrize("name", ["level.txt", "level.ber.bak", "level.ber.ber", "level"])
def test_check_extension_rejects(name):
    with pytest.raises(MapError, match="ber"):
        check_extension(name)


def test_read_map_round_trip(tmp_path):
    path = write(tmp_path, VALID)
    lines = read_map(path)
    assert "".join(lines) == VALID
    assert len(lines) == 3
    assert all(line.endswith("\n") for line in lines)


def test_read_map_last_line_without_newline(tmp_path):
    text = VALID.rstrip("\n")
    lines = read_map(write(tmp_path, text))
    assert "".join(lines) == text
    assert not lines[-1].endswith("\n")


def test_read_map_empty_file(tmp_path):
    with pytest.raises(MapError, match="invalid"):
        read_map(write(tmp_path, ""))


def test_read_map_missing_file(tmp_path):
    with pytest.raises(MapError, match="invalid"):
        read_map(tmp_path / "absent.ber")


def test_count_elements_valid():
    assert count_elements(lines_of(VALID)) == (1, 1, 1)


def test_count_elements_skips_first_column():
    assert count_elements(["CPE", "1C1"]) == (1, 1, 1)


def test_check_map_valid():
    info = check_map(lines_of(VALID))
    assert info.start == (1, 1)
    assert info.collectibles == 1
    assert info.width == 7
    assert info.height == 3
    assert ["".join(row) for row in info.grid] == VALID.splitlines()


def test_check_map_not_rectangle():
    with pytest.raises(MapError, match="rectangle"):
        check_map(lines_of("1111111\n1P0C0E1\n11111\n"))


def test_check_map_single_line_without_newline_is_not_rectangle():
    with pytest.raises(MapError, match="rectangle"):
        check_map(["1111111"])


def test_check_map_open_border():
    with pytest.raises(MapError, match="surrounded"):
        check_map(lines_of("1111111\n0P0C0E1\n1111111\n"))


def test_check_map_open_bottom():
    with pytest.raises(MapError, match="surrounded"):
        check_map(lines_of("1111111\n1P0C0E1\n1110111\n"))


def test_check_map_too_narrow():
    with pytest.raises(MapError, match="surrounded"):
        check_map(lines_of("11\n11\n"))


def test_check_map_invalid_character():
    with pytest.raises(MapError, match="Invalid character"):
        check_map(lines_of("1111111\n1PXC0E1\n1111111\n"))


def test_check_map_enemy_needs_bonus():
    text = "11111111\n1P0CM0E1\n11111111\n"
    with pytest.raises(MapError, match="Invalid character"):
        check_map(lines_of(text))
    info = check_map(lines_of(text), bonus=True)
    assert info.start == (1, 1)


def test_check_map_missing_collectible():
    with pytest.raises(MapError, match="missing"):
        check_map(lines_of("1111111\n1P000E1\n1111111\n"))


def test_check_map_missing_exit():
    with pytest.raises(MapError, match="missing"):
        check_map(lines_of("1111111\n1P0C001\n1111111\n"))


def test_check_map_two_players():
    with pytest.raises(MapError, match="duplicate"):
        check_map(lines_of("1111111\n1P0CPE1\n1111111\n"))


def test_check_map_two_exits():
    with pytest.raises(MapError, match="duplicate"):
        check_map(lines_of("1111111\n1PECE01\n1111111\n"))


def test_check_map_empty():
    with pytest.raises(MapError):
        check_map([])


def test_flood_fill_marks_reachable_cells():
    info = check_map(lines_of(VALID))
    reached = flood_fill(info.grid, info.start)
    assert info.start in reached
    assert all(info.grid[r][c] in {"P", "2", "c", "e"} for r, c in reached)
    assert not any(ch in {"0", "C", "E"} for row in info.grid for ch in row)
    assert "".join(info.grid[1]) == "1P2c2e1"


def test_flood_fill_does_not_pass_exit():
    info = check_map(lines_of("11111111\n1P0E0C01\n11111111\n"))
    reached = flood_fill(info.grid, info.start)
    assert (1, 3) in reached
    assert (1, 5) not in reached
    assert info.grid[1][5] == "C"


def test_flood_fill_bonus_marks_enemy():
    info = check_map(lines_of("11111111\n1P0CM0E1\n11111111\n"), bonus=True)
    flood_fill(info.grid, info.start, bonus=True)
    assert info.grid[1][4] == "m"
    assert info.grid[1][6] == "e"


def test_valid_path_unreachable_collectible():
    info = check_map(lines_of("1111111\n1P1C0E1\n1111111\n"))
    with pytest.raises(MapError, match="No valid path"):
        valid_path(info.grid, info.start)


def test_valid_path_exit_blocks_collectible():
    info = check_map(lines_of("11111111\n1P0E0C01\n11111111\n"))
    with pytest.raises(MapError, match="No valid path"):
        valid_path(info.grid, info.start)


def test_load_map(tmp_path):
    info = load_map(write(tmp_path, VALID))
    assert info.start == (1, 1)
    assert info.collectibles == 1
    assert info.grid[info.start[0]][info.start[1]] == "P"
    assert sum(row.count("c") for row in info.grid) == info.collectibles
    assert sum(row.count("e") for row in info.grid) == 1


def test_load_map_bad_extension(tmp_path):
    path = write(tmp_path, VALID, name="level.txt")
    with pytest.raises(MapError, match="ber"):
        load_map(path)


def test_load_map_no_path(tmp_path):
    path = write(tmp_path, "1111111\n1P1C0E1\n1111111\n")
    with pytest.raises(MapError, match="No valid path"):
        load_map(path)


def test_load_map_bonus_enemy(tmp_path):
    path = write(tmp_path, "11111111\n1P0CM0E1\n11111111\n")
    with pytest.raises(MapError, match="Invalid character"):
        load_map(path)
    info = load_map(path, bonus=True)
    assert sum(row.count("m") for row in info.grid) == 1