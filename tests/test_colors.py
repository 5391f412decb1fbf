import pytest

from elorpg.colors import lookup_color


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("snow", 0xFFFAFA),
        ("ghost white", 0xF8F8FF),
        ("black", 0x0),
        ("white", 0xFFFFFF),
        ("navy", 0x80),
        ("red", 0xFF0000),
        ("thistle4", 0x8B7B8B),
        ("gray50", 0x7F7F7F),
        ("grey100", 0xFFFFFF),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_names(name, value):
    assert lookup_color(name) == value


def test_none_is_transparent():
    assert lookup_color("none") == -1


def test_case_insensitive():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Dark Red") == 0x8B0000


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def test_gray_and_grey_agree():
    for number in range(101):
        assert lookup_color(f"gray{number}") == lookup_color(f"grey{number}")


def test_grey_levels_are_neutral_and_increasing():
    values = [lookup_color(f"gray{number}") for number in range(101)]
    assert values == sorted(values)
    for value in values:
        assert value & 0xFF == (value >> 8) & 0xFF == (value >> 16) & 0xFF


def test_first_shade_matches_base_where_database_agrees():
    for base in ("snow", "red", "green", "orange", "magenta", "yellow"):
        assert lookup_color(f"{base}1") == lookup_color(base)


def test_values_are_in_rgb_range():
    names = ["snow", "thistle", "dodgerblue3", "gray73", "darkmagenta"]
    for name in names:
        assert 0 <= lookup_color(name) <= 0xFFFFFF