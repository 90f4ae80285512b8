import pytest

from ftkit.colors import lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("ghost white", 0xF8F8FF),
        ("black", 0x0),
        ("navy", 0x80),
        ("red", 0xFF0000),
        ("gray50", 0x7F7F7F),
        ("lightgoldenrodyellow", 0xFAFAD2),
        ("thistle4", 0x8B7B8B),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_ignores_case():
    assert lookup_color("GHOST White") == lookup_color("ghost white")
    assert lookup_color("RED") == 0xFF0000


def test_first_entry_wins_for_repeated_names():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_none_is_transparent():
    assert lookup_color("none") == -1
    assert lookup_color("NONE") == -1


@pytest.mark.parametrize("name", ["", "nosuchcolour", "red ", "grey101", "réd"])
def test_unknown_names_give_zero(name):
    assert lookup_color(name) == 0


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_spellings_agree(level):
    assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_gray_levels_are_neutral_and_increasing():
    values = [lookup_color(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    for value in values:
        r, g, b = (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF
        assert r == g == b
    assert values[0] == 0x0
    assert values[-1] == 0xFFFFFF


@pytest.mark.parametrize(
    "spaced, joined",
    [
        ("alice blue", "aliceblue"),
        ("dodger blue", "dodgerblue"),
        ("medium sea", "mediumseagreen"),
        ("light green", "lightgreen"),
        ("dark red", "darkred"),
    ],
)
def test_spaced_and_joined_names_match(spaced, joined):
    assert lookup_color(spaced) == lookup_color(joined)


def test_values_fit_in_24_bits():
    for name in ["white", "gray100", "cyan", "magenta", "yellow", "blue"]:
        assert 0 <= lookup_color(name) <= 0xFFFFFF