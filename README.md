# asciidraw

Draw simple shapes and large bitmap-font characters in the terminal using
asterisks.

## Installation

```
pip install .
```

## Interactive use

```
asciidraw
```

The program prints `Welcome!` and then asks repeatedly which shape to print:

- `i` prints a triangle (left column 5, size 7)
- `s` prints a 5x5 square (left column 5)
- `c` prints the characters `a`, `b` and `c` in the 11x16 font
- `t` prints an arrow (a triangle head over a square shaft)
- `q` prints `Bye!` and quits

Input is read one character at a time, so every character typed counts as a
choice; newlines are skipped. End of input also ends the program. Any other
character gets an "Unrecognized option" message before you are asked again.
The command takes no options other than `-h`/`--help`.

The same menu can be driven from any text streams with
`asciidraw.cli.run(stdin, stdout)`.

## Library use

```python
from asciidraw.shapes import render_square, render_triangle, render_arrow, triangle_lines
from asciidraw.chars import render_char_11x16, char_11x16_lines

print(render_square(5, 5), end="")    # 5 rows of 5 stars, indented 5 spaces
print(render_triangle(5, 7), end="")  # 8 rows, widening by two stars per row
print(render_arrow(), end="")

for line in triangle_lines(0, 3):
    print(line)

print(render_char_11x16("A"), end="")
```

`square_lines`, `triangle_lines`, `arrow_lines` and `char_11x16_lines`
return lists of text lines; `render_square`, `render_triangle`,
`render_arrow` and `render_char_11x16` return the same text as one string
with a newline after every line. `render_char_11x16` adds one blank line
after the character. A character is drawn with one text line per font
column, 16 cells wide, so it appears turned on its side.

The font modules `asciidraw.font_11x16`, `asciidraw.font_8x12` and
`asciidraw.font_5x7` each provide `glyph(char)`, which returns the raw
bitmap values for one character: 11 column words for the 11x16 font,
12 row bytes for the 8x12 font and 5 column bytes for the 5x7 font. The
11x16 and 8x12 fonts cover `0x20` to `0x7E`; the 5x7 font also has a degree
sign at `0x7F`. Each module also defines `WIDTH`, `HEIGHT`, `FIRST` and
`LAST`. A character outside a font, or anything that is not a single
character, raises `ValueError`.

Only the 11x16 font can be drawn with stars; the 8x12 and 5x7 fonts are
available as raw bitmaps only.

## Running the tests

```
pip install .[test]
pytest
```