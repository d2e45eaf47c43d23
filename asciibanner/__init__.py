"""Render text as large ascii-art banners, using flat-text glyph fonts."""

# ruff: noqa: F401

from ._version import __version__, version_info
from . import utils
from . import text

from .text import (
    FontError,
    FontTruncatedError,
    FontIncompleteError,
    GlyphSet,
    parse_glyph_sheet,
    load_glyph_set,
    sanitize_input,
    render_line,
    render_text,
    print_banner,
)
from .utils import logger, find_font_file, get_font_names


DEFAULT_FONT = "shadow"


def load_font(name=DEFAULT_FONT, **kwargs):
    """Load a GlyphSet from a builtin font name, a font in ``ASCIIBANNER_FONT_DIR``,
    or a path to a font file.
    """
    return load_glyph_set(find_font_file(name), **kwargs)
