"""Star-drawn squares, triangles and an arrow made of both."""

from __future__ import annotations

ARROW_LEFT_COL = 5
ARROW_SIZE = 5


def _row(spaces: int, stars: int) -> str:
    return " " * spaces + "*" * stars


def square_lines(left_col: int, size: int) -> list[str]:
    """Return the rows of a ``size`` x ``size`` square whose left column is ``left_col``."""
    spaces = max(left_col, 0)
    stars = max(left_col + size - spaces, 0)
    return [_row(spaces, stars) for _ in range(size)]


def triangle_lines(left_col: int, size: int) -> list[str]:
    """Return the ``size + 1`` rows of a triangle whose left edge is at ``left_col``."""
    lines = []
    for row in range(size + 1):
        min_col = left_col + size - row
        max_col = left_col + size + row
        spaces = max(min_col, 0)
        stars = max(max_col + 1 - spaces, 0)
        lines.append(_row(spaces, stars))
    return lines


def arrow_lines() -> list[str]:
    """Return the rows of an arrow: a triangle head over a square shaft."""
    return triangle_lines(ARROW_LEFT_COL, ARROW_SIZE) + square_lines(
        ARROW_LEFT_COL + ARROW_SIZE - 2, ARROW_SIZE
    )


def _render(lines: list[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def render_square(left_col: int, size: int) -> str:
    """Return the square as text, each row ending in a newline."""
    return _render(square_lines(left_col, size))


def render_triangle(left_col: int, size: int) -> str:
    """Return the triangle as text, each row ending in a newline."""
    return _render(triangle_lines(left_col, size))


def render_arrow() -> str:
    """Return the arrow as text, each row ending in a newline."""
    return _render(arrow_lines())