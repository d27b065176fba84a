import string

import pytest

from asciidraw import font_11x16


PRINTABLE = [chr(c) for c in range(0x20, 0x7F)]


def test_space_is_blank():
    assert font_11x16.glyph(" ") == (0,) * 11


def test_exclamation_from_table():
    assert font_11x16.glyph("!") == (
        0x0000, 0x0000, 0x0000, 0x007C, 0x33FF, 0x33FF, 0x007C,
        0x0000, 0x0000, 0x0000, 0x0000,
    )


def test_letter_a_from_table():
    assert font_11x16.glyph("a") == (
        0x1C00, 0x3E40, 0x3360, 0x3360, 0x3360, 0x3360, 0x3360,
        0x3360, 0x3FE0, 0x3FC0, 0x0000,
    )


def test_tilde_is_last_entry():
    assert font_11x16.glyph("~") == (
        0x0010, 0x0018, 0x000C, 0x0004, 0x000C, 0x0018, 0x0010,
        0x0018, 0x000C, 0x0004, 0x0000,
    )


def test_underscore_uses_top_bits():
    assert set(font_11x16.glyph("_")) == {0xC000}


@pytest.mark.parametrize("char", PRINTABLE)
def test_every_glyph_has_eleven_16bit_columns(char):
    columns = font_11x16.glyph(char)
    assert len(columns) == font_11x16.WIDTH
    assert all(0 <= word < (1 << font_11x16.HEIGHT) for word in columns)


@pytest.mark.parametrize("char", string.ascii_letters + string.digits)
def test_alphanumerics_are_not_blank(char):
    lit_columns = [word for word in font_11x16.glyph(char) if word > 0]
    assert len(lit_columns) >= 1


@pytest.mark.parametrize("char", ["\x1f", "\x7f", "\n", "é"])
def test_out_of_range_raises(char):
    with pytest.raises(ValueError):
        font_11x16.glyph(char)


@pytest.mark.parametrize("value", ["", "ab", 65])
def test_not_a_single_character_raises(value):
    with pytest.raises(ValueError):
        font_11x16.glyph(value)