import io

from asciidraw import cli
from asciidraw.chars import render_char_11x16
from asciidraw.shapes import render_arrow, render_square, render_triangle

WELCOME = "Welcome!\n"
BYE = "Bye!\n"


def _run(text):
    out = io.StringIO()
    cli.run(io.StringIO(text), out)
    return out.getvalue()


def test_quit_immediately():
    assert _run("q\n") == WELCOME + cli.PROMPT + BYE


def test_end_of_input_stops_after_prompt():
    assert _run("") == WELCOME + cli.PROMPT


def test_newlines_are_skipped():
    assert _run("\n\n\nq\n") == WELCOME + cli.PROMPT + BYE


def test_triangle_choice():
    expected = (
        WELCOME
        + cli.PROMPT
        + "You selected triangle:\n"
        + render_triangle(5, 7)
        + cli.PROMPT
        + BYE
    )
    assert _run("i\nq\n") == expected


def test_square_choice():
    expected = (
        WELCOME + cli.PROMPT + "You selected square:\n" + render_square(5, 5)
        + cli.PROMPT + BYE
    )
    assert _run("s\nq\n") == expected


def test_arrow_choice():
    expected = (
        WELCOME + cli.PROMPT + "You selected arrow:\n" + render_arrow()
        + cli.PROMPT + BYE
    )
    assert _run("t\nq\n") == expected


def test_chars_choice_draws_a_b_c():
    expected = (
        WELCOME
        + cli.PROMPT
        + "You selected chars:\n"
        + render_char_11x16("a")
        + render_char_11x16("b")
        + render_char_11x16("c")
        + cli.PROMPT
        + BYE
    )
    assert _run("c\nq\n") == expected


def test_unrecognized_option():
    expected = (
        WELCOME
        + cli.PROMPT
        + "Unrecognized option 'x', please try again!\n"
        + cli.PROMPT
        + BYE
    )
    assert _run("x\nq\n") == expected


def test_several_choices_on_one_line_are_read_one_by_one():
    expected = (
        WELCOME
        + cli.PROMPT
        + "You selected square:\n"
        + render_square(5, 5)
        + cli.PROMPT
        + BYE
    )
    assert _run("sq") == expected


def test_input_after_quit_is_ignored():
    assert _run("q\ni\n") == WELCOME + cli.PROMPT + BYE


def test_prompt_repeats_until_end_of_input():
    output = _run("z\ny\n")
    assert output.count(cli.PROMPT) == 3
    assert output.endswith(cli.PROMPT)
    assert BYE not in output