import io
import logging

import pytest

from asciibanner.text import (
    GlyphSet,
    parse_glyph_sheet,
    render_line,
    render_text,
    print_banner,
)


@pytest.fixture
def glyph_set(make_sheet):
    return parse_glyph_sheet(make_sheet())


def test_render_empty(glyph_set):
    assert list(render_text(glyph_set, "")) == []


def test_render_single_char(glyph_set):
    rows = list(render_text(glyph_set, "A"))
    assert len(rows) == 8 + 2
    assert rows[:8] == list(glyph_set[ord("A")])
    assert rows[8:] == ["", ""]


def test_render_line(glyph_set):
    rows = render_line(glyph_set, "Hi!")
    assert len(rows) == 8
    for h in range(8):
        assert rows[h] == f"H{h}i{h}!{h}"


def test_render_keeps_spaces():
    gs = GlyphSet([("  ", ".."), ("ab", "cd")], first=32)
    assert render_line(gs, "! !") == ["ab  ab", "cd..cd"]


def test_render_line_spacing(glyph_set):
    rows = list(render_text(glyph_set, "a\nb"))
    assert rows == [f"a{h}" for h in range(8)] + ["", ""] + [
        f"b{h}" for h in range(8)
    ] + ["", ""]


def test_render_empty_lines(glyph_set):
    # An empty logical line produces one blank row and no extra spacing
    assert list(render_text(glyph_set, "\n")) == ["", ""]
    assert list(render_text(glyph_set, "\n\n")) == ["", "", ""]

    rows = list(render_text(glyph_set, "a\n\nb"))
    assert len(rows) == 10 + 1 + 10
    assert rows[10] == ""
    assert rows[11] == "b0"

    rows = list(render_text(glyph_set, "\na"))
    assert rows[0] == ""
    assert rows[1:9] == [f"a{h}" for h in range(8)]
    assert rows[9:] == ["", ""]


def test_render_fallback(glyph_set, caplog):
    fallback = glyph_set[32]

    with caplog.at_level(logging.WARNING, logger="asciibanner"):
        rows = render_line(glyph_set, "aé\x7f\tb")
    for h in range(8):
        assert rows[h] == f"a{h}" + 3 * fallback[h] + f"b{h}"

    # Fallback chars are not skipped and do not break the output
    with caplog.at_level(logging.WARNING, logger="asciibanner"):
        rows = list(render_text(glyph_set, "☃"))
    assert rows[:8] == list(fallback)
    assert "Cannot render chars" in caplog.text


def test_render_no_warning_for_supported(glyph_set, caplog):
    with caplog.at_level(logging.WARNING, logger="asciibanner"):
        list(render_text(glyph_set, "Hello\nWorld"))
    assert "Cannot render" not in caplog.text


def test_print_banner(glyph_set):
    f = io.StringIO()
    print_banner(glyph_set, "ab\n\nc", file=f)
    lines = f.getvalue().split("\n")
    # 10 rows for "ab", 1 for the empty line, 10 for "c", and the final newline
    assert len(lines) == 10 + 1 + 10 + 1
    assert lines[0] == "a0b0"
    assert lines[10] == ""
    assert lines[11] == "c0"
    assert lines[-1] == ""

    f = io.StringIO()
    print_banner(glyph_set, "", file=f)
    assert f.getvalue() == ""


def test_print_banner_stdout(glyph_set, capsys):
    print_banner(glyph_set, "x")
    out = capsys.readouterr().out
    assert out == "".join(f"x{h}\n" for h in range(8)) + "\n\n"
