import pytest

from asciidraw import chars, font_11x16


PRINTABLE = [chr(code) for code in range(0x20, 0x7F)]


def _decode(line):
    return int(line.replace("*", "1").replace(" ", "0"), 2)


def test_lines_have_font_dimensions():
    for char in PRINTABLE:
        lines = chars.char_11x16_lines(char)
        assert len(lines) == 11
        assert all(len(line) == 16 for line in lines)
        assert all(set(line) <= {"*", " "} for line in lines)


def test_lines_round_trip_to_font_words():
    for char in PRINTABLE:
        lines = chars.char_11x16_lines(char)
        assert tuple(_decode(line) for line in lines) == font_11x16.glyph(char)


def test_space_is_blank():
    assert chars.char_11x16_lines(" ") == [" " * 16] * 11


def test_underscore_sets_first_two_cells():
    lines = chars.char_11x16_lines("_")
    assert all(line == "**" + " " * 14 for line in lines)


def test_render_ends_with_blank_line():
    text = chars.render_char_11x16("a")
    assert text.endswith("\n\n")
    assert text.split("\n")[:11] == chars.char_11x16_lines("a")
    assert text.count("\n") == 12


@pytest.mark.parametrize("bad", ["\x7f", "\t", "ab", ""])
def test_unknown_character_raises(bad):
    with pytest.raises(ValueError):
        chars.char_11x16_lines(bad)


def test_render_unknown_character_raises():
    with pytest.raises(ValueError):
        chars.render_char_11x16("\x00")