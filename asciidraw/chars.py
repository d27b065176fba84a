"""Drawing characters of the 11x16 font with stars."""

from __future__ import annotations

from asciidraw import font_11x16


def char_11x16_lines(char: str) -> list[str]:
    """Return the 11 lines drawing ``char``, one per font column, 16 cells each.

    Raises ValueError if ``char`` is not in the font.
    """
    words = font_11x16.glyph(char)
    return [
        "".join(
            "*" if word & (1 << (font_11x16.HEIGHT - 1 - bit)) else " "
            for bit in range(font_11x16.HEIGHT)
        )
        for word in words
    ]


def render_char_11x16(char: str) -> str:
    """Return ``char`` drawn with stars, followed by a blank line."""
    return "".join(f"{line}\n" for line in char_11x16_lines(char)) + "\n"