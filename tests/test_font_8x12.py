import string

import pytest

from asciidraw import font_8x12


PRINTABLE = [chr(code) for code in range(0x20, 0x7F)]


def test_every_glyph_has_twelve_rows_of_bytes():
    for char in PRINTABLE:
        rows = font_8x12.glyph(char)
        assert len(rows) == font_8x12.HEIGHT
        assert all(0 <= row <= 0xFF for row in rows)


def test_space_is_blank():
    assert font_8x12.glyph(" ") == (0,) * 12


def test_underscore_is_bottom_row():
    rows = font_8x12.glyph("_")
    assert rows[-1] == 0xFF
    assert set(rows[:-1]) == {0}


def test_letter_a_matches_table():
    assert font_8x12.glyph("A") == (
        0x00, 0x38, 0x6C, 0xC6, 0xC6, 0xC6, 0xFE, 0xC6, 0xC6, 0xC6, 0x00, 0x00,
    )


@pytest.mark.parametrize(
    "char", string.ascii_letters + string.digits + string.punctuation
)
def test_visible_characters_are_not_blank(char):
    lit_rows = [row for row in font_8x12.glyph(char) if row > 0]
    assert len(lit_rows) >= 1


def test_upper_and_lower_differ():
    for upper, lower in zip(string.ascii_uppercase, string.ascii_lowercase):
        assert font_8x12.glyph(upper) != font_8x12.glyph(lower)


@pytest.mark.parametrize("bad", ["\x7f", "\x1f", "\n", "é", "ab", ""])
def test_out_of_range_or_wrong_length_raises(bad):
    with pytest.raises(ValueError):
        font_8x12.glyph(bad)


def test_non_string_raises():
    with pytest.raises(ValueError):
        font_8x12.glyph(65)