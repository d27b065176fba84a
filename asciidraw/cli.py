"""Interactive menu that draws shapes and characters on the terminal."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import TextIO

from asciidraw.chars import render_char_11x16
from asciidraw.shapes import render_arrow, render_square, render_triangle

PROMPT = (
    "Select which shape you want to print "
    "(Triangle = i, Square = s, Chars = c, Arrow = t) or 'q' to quit\n> "
)


def _characters(stream: TextIO) -> Iterator[str]:
    while ch := stream.read(1):
        yield ch


def _next_choice(chars: Iterator[str]) -> str | None:
    """Return the next character that is not a newline, or None at end of input."""
    return next((ch for ch in chars if ch != "\n"), None)


def run(stdin: TextIO, stdout: TextIO) -> None:
    """Run the menu, reading choices from ``stdin`` until 'q' or end of input."""
    stdout.write("Welcome!\n")
    chars = _characters(stdin)
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        choice = _next_choice(chars)
        if choice is None:
            return
        if choice == "i":
            stdout.write("You selected triangle:\n")
            stdout.write(render_triangle(5, 7))
        elif choice == "s":
            stdout.write("You selected square:\n")
            stdout.write(render_square(5, 5))
        elif choice == "c":
            stdout.write("You selected chars:\n")
            for char in "abc":
                stdout.write(render_char_11x16(char))
        elif choice == "t":
            stdout.write("You selected arrow:\n")
            stdout.write(render_arrow())
        elif choice == "q":
            stdout.write("Bye!\n")
            return
        else:
            stdout.write(f"Unrecognized option '{choice}', please try again!\n")


def main(argv: list[str] | None = None) -> int:
    """Start the interactive menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="asciidraw", description="Draw shapes and characters with stars."
    )
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())