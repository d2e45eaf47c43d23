"""
Composing glyphs into banners. Each logical line of the text (split on
newlines) becomes a block of ``height`` rows, in which row ``h`` is the
concatenation of row ``h`` of the glyph of every character.
"""

import sys

from ..utils import logger


# Blank rows emitted after the block of a non-empty line
LINE_SPACING = 2


def render_line(glyph_set, line):
    """Render a single (non-empty) logical line. Returns a list of rows."""
    indices = glyph_set.glyph_indices(line)
    block = glyph_set.rows[indices]  # (nchars, height)
    return ["".join(block[:, h]) for h in range(glyph_set.height)]


def render_text(glyph_set, text):
    """Render the given text, yielding the output rows in order.

    An empty text produces no rows. An empty logical line produces a
    single blank row. A non-empty logical line produces its block of
    rows, followed by two blank rows.
    """
    if not text:
        return

    unsupported = sorted({c for c in text if c != "\n" and c not in glyph_set})
    if unsupported:
        chars = " ".join(repr(c) for c in unsupported)
        logger.warning(f"Cannot render chars {chars}, using fallback glyph.")

    for line in text.split("\n"):
        if not line:
            yield ""
            continue
        yield from render_line(glyph_set, line)
        for _ in range(LINE_SPACING):
            yield ""


def print_banner(glyph_set, text, file=None):
    """Render the text and print the rows to the given file (default stdout)."""
    file = sys.stdout if file is None else file
    for row in render_text(glyph_set, text):
        print(row, file=file)
