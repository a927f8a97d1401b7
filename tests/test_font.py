import pytest

from fujihack.font import GLYPH_HEIGHT, GLYPH_WIDTH, GLYPHS, glyph, glyph_width


def test_letter_a_rows():
    assert glyph("A") == (
        " ### ",
        "#   #",
        "#   #",
        "#   #",
        "#####",
        "#   #",
        "#   #",
    )


def test_first_definition_of_duplicate_wins():
    assert glyph("-")[3] == " ### "
    assert glyph("-")[4] == "     "


def test_unknown_character_draws_blank():
    assert glyph("\u20ac") == glyph(" ")
    assert glyph("\0") == glyph(" ")


def test_every_glyph_is_well_formed():
    for rows in GLYPHS.values():
        assert len(rows) == GLYPH_HEIGHT
        for row in rows:
            assert len(row) == GLYPH_WIDTH
            assert set(row) <= {"#", " "}


def test_widths():
    assert glyph_width("A") == 4
    assert glyph_width("I") == 0
    assert glyph_width(" ") == 0


@pytest.mark.parametrize("char", sorted(GLYPHS))
def test_width_is_rightmost_lit_column(char):
    width = glyph_width(char)
    rows = glyph(char)
    assert all("#" not in row[width + 1:] for row in rows)
    if any("#" in row for row in rows):
        assert any(row[width] == "#" for row in rows)


@pytest.mark.parametrize("bad", ["", "ab"])
def test_glyph_requires_single_character(bad):
    with pytest.raises(ValueError):
        glyph(bad)
    with pytest.raises(ValueError):
        glyph_width(bad)