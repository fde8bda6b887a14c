import pytest

from fdfview.mapfile import (
    DEFAULT_COLOR,
    HeightMap,
    MapError,
    load_map,
    map_dimensions,
    parse_color,
    parse_map,
)


def test_parse_color_default_is_white():
    assert parse_color("10") == 0xFFFFFF
    assert parse_color("10") == DEFAULT_COLOR


def test_parse_color_reads_hex():
    assert parse_color("10,0xFF0000") == 0xFF0000
    assert parse_color("0,0x00FF00") == 0x00FF00


def test_parse_color_without_0x_prefix_stays_default():
    assert parse_color("10,FF0000") == DEFAULT_COLOR


def test_map_dimensions():
    assert map_dimensions(["1 2 3\n", "4 5 6\n"]) == (3, 2)


def test_map_dimensions_collapses_repeated_spaces():
    assert map_dimensions(["1   2 3\n", "  4 5   6\n"]) == (3, 2)


def test_map_dimensions_empty():
    assert map_dimensions([]) == (0, 0)


def test_inconsistent_width_raises():
    with pytest.raises(MapError):
        map_dimensions(["1 2 3\n", "4 5\n"])


def test_parse_map_heights_and_colors():
    hm = parse_map(["0 1\n", "2 3,0xFF0000\n"])
    assert hm.z == [[0, 1], [2, 3]]
    assert hm.colors == [[DEFAULT_COLOR, DEFAULT_COLOR], [DEFAULT_COLOR, 0xFF0000]]
    assert (hm.width, hm.height) == (2, 2)


def test_parse_map_negative_heights():
    hm = parse_map(["-5 +7 -12\n"])
    assert hm.z == [[-5, 7, -12]]


def test_parse_map_empty_raises():
    with pytest.raises(MapError):
        parse_map([])


def test_parse_map_inconsistent_raises():
    with pytest.raises(MapError):
        parse_map(["1 2\n", "1\n"])


def test_load_map_round_trip(tmp_path):
    path = tmp_path / "map.fdf"
    path.write_text("0 0 0\n0 10,0xFF0000 0\n0 0 0\n", encoding="utf-8")
    hm = load_map(path)
    assert hm.z == [[0, 0, 0], [0, 10, 0], [0, 0, 0]]
    assert hm.colors[1][1] == 0xFF0000
    assert hm.colors[0][0] == DEFAULT_COLOR
    assert hm.width == 3 and hm.height == 3


def test_load_map_without_trailing_newline(tmp_path):
    path = tmp_path / "map.fdf"
    path.write_text("1 2\n3 4", encoding="utf-8")
    assert load_map(path).z == [[1, 2], [3, 4]]


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(MapError):
        load_map(tmp_path / "missing.fdf")


def test_heightmap_default_colors_and_ragged_rows():
    hm = HeightMap([[1, 2], [3, 4]])
    assert hm.colors == [[DEFAULT_COLOR] * 2] * 2
    with pytest.raises(MapError):
        HeightMap([[1, 2], [3]])