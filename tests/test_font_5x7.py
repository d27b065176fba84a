import string

import pytest

from asciidraw import font_5x7


COVERED = [chr(c) for c in range(0x20, 0x80)]


def test_space_is_blank():
    assert font_5x7.glyph(" ") == (0, 0, 0, 0, 0)


def test_letter_a_from_table():
    assert font_5x7.glyph("A") == (0x7E, 0x11, 0x11, 0x11, 0x7E)


def test_digit_zero_from_table():
    assert font_5x7.glyph("0") == (0x3E, 0x51, 0x49, 0x45, 0x3E)


def test_degree_sign_at_0x7f():
    assert font_5x7.glyph("\x7f") == (0x00, 0x06, 0x09, 0x09, 0x06)


def test_backslash_entry():
    assert font_5x7.glyph("\\") == (0x02, 0x04, 0x08, 0x10, 0x20)


@pytest.mark.parametrize("char", COVERED)
def test_every_glyph_fits_five_by_seven(char):
    columns = font_5x7.glyph(char)
    assert len(columns) == font_5x7.WIDTH
    assert all(0 <= byte < (1 << font_5x7.HEIGHT) for byte in columns)


@pytest.mark.parametrize("char", string.ascii_letters + string.digits)
def test_alphanumerics_are_not_blank(char):
    lit_columns = [byte for byte in font_5x7.glyph(char) if byte > 0]
    assert len(lit_columns) >= 1


def test_mirrored_brackets():
    assert font_5x7.glyph("(") == tuple(reversed(font_5x7.glyph(")")))
    assert font_5x7.glyph("<")[:4] == tuple(reversed(font_5x7.glyph(">")[1:]))


@pytest.mark.parametrize("char", ["\x1f", "\x80", "\t", "ß"])
def test_out_of_range_raises(char):
    with pytest.raises(ValueError):
        font_5x7.glyph(char)


@pytest.mark.parametrize("value", ["", "xy", None])
def test_not_a_single_character_raises(value):
    with pytest.raises(ValueError):
        font_5x7.glyph(value)