import pytest

from asciidraw import shapes


def test_smallest_square():
    assert shapes.square_lines(0, 1) == ["*"]


def test_smallest_triangle():
    assert shapes.triangle_lines(0, 1) == [" *", "***"]


@pytest.mark.parametrize("left, size", [(0, 3), (5, 5), (2, 7)])
def test_square_shape(left, size):
    lines = shapes.square_lines(left, size)
    assert len(lines) == size
    for line in lines:
        assert line == " " * left + "*" * size


@pytest.mark.parametrize("size", [0, -1, -5])
def test_square_without_size_is_empty(size):
    assert shapes.square_lines(3, size) == []


def test_square_negative_left_clips():
    lines = shapes.square_lines(-2, 5)
    assert len(lines) == 5
    assert all(line == "*" * 3 for line in lines)


@pytest.mark.parametrize("left, size", [(0, 0), (5, 7), (3, 4)])
def test_triangle_shape(left, size):
    lines = shapes.triangle_lines(left, size)
    assert len(lines) == size + 1
    for row, line in enumerate(lines):
        assert line.count("*") == 2 * row + 1
        assert line.lstrip(" ") == "*" * (2 * row + 1)
        assert len(line) - len(line.lstrip(" ")) == left + size - row


def test_triangle_last_row_starts_at_left_col():
    lines = shapes.triangle_lines(4, 6)
    assert lines[-1].startswith(" " * 4 + "*")


def test_triangle_negative_size_is_empty():
    assert shapes.triangle_lines(2, -1) == []


def test_arrow_is_triangle_then_square():
    lines = shapes.arrow_lines()
    head = shapes.triangle_lines(5, 5)
    shaft = shapes.square_lines(8, 5)
    assert lines == head + shaft


def test_arrow_shaft_is_centred_under_tip():
    lines = shapes.arrow_lines()
    tip = lines[0].index("*")
    shaft = lines[-1]
    start = shaft.index("*")
    end = len(shaft) - 1
    assert start + end == 2 * tip


def test_render_square_joins_lines():
    text = shapes.render_square(2, 3)
    assert text.endswith("\n")
    assert text.splitlines() == shapes.square_lines(2, 3)


def test_render_triangle_joins_lines():
    text = shapes.render_triangle(5, 7)
    assert text.count("\n") == 8
    assert text.splitlines() == shapes.triangle_lines(5, 7)


def test_render_arrow_joins_lines():
    assert shapes.render_arrow().splitlines() == shapes.arrow_lines()


def test_render_empty_square():
    assert shapes.render_square(1, 0) == ""