"""
The three stages of turning text into a banner:

* Font loading: parse a glyph sheet into a GlyphSet.
* Sanitizing: turn the raw input tokens into the text to render.
* Rendering: compose the glyphs of each logical line into rows.

The GlyphSet is created once and is read-only after that; the other
stages are plain functions.
"""

from ._glyphset import (  # noqa: F401
    DEFAULT_HEIGHT,
    DEFAULT_FIRST,
    DEFAULT_COUNT,
    FontError,
    FontTruncatedError,
    FontIncompleteError,
    GlyphSet,
    parse_glyph_sheet,
    load_glyph_set,
)
from ._sanitize import DELIMITER_PAIRS, sanitize_input  # noqa: F401
from ._render import render_line, render_text, print_banner  # noqa: F401
