"""
Loading of banner fonts. A banner font is a flat text file (a glyph sheet)
that contains one block of ``height`` lines per printable character, in
ascending code order. Blocks are optionally separated by a single blank line,
and the sheet may start with any number of blank lines.
"""

import numpy as np

from ..utils import logger


DEFAULT_HEIGHT = 8  # Rows per glyph
DEFAULT_FIRST = 32  # The code of the first glyph, i.e. the space
DEFAULT_COUNT = 95  # The printable ascii range 32..126


class FontError(ValueError):
    """Raised when a banner font is malformed."""

    def __init__(self, msg, filename=None):
        if filename:
            msg = f"{msg} (in {filename})"
        super().__init__(msg)
        self.filename = filename


class FontTruncatedError(FontError):
    """Raised when the font sheet ends in the middle of a glyph."""

    def __init__(self, index, line, filename=None):
        msg = f"malformed font: truncated glyph {index} starting at line {line + 1}"
        super().__init__(msg, filename)
        self.index = index
        self.line = line


class FontIncompleteError(FontError):
    """Raised when the font sheet contains fewer glyphs than expected."""

    def __init__(self, found, expected, filename=None):
        msg = (
            "malformed font: found fewer glyphs than expected "
            f"(found {found}, expected {expected})"
        )
        super().__init__(msg, filename)
        self.found = found
        self.expected = expected


class GlyphSet:
    """An immutable collection of glyphs, for a contiguous range of codes.

    Parameters:
        glyphs (sequence): the glyphs, each a sequence of row strings. The
            glyph at position ``i`` represents the character with code ``first + i``.
        first (int): the code of the first glyph. Default 32 (the space).

    All glyphs must have the same number of rows. The glyph at index 0 doubles
    as the fallback glyph for characters outside the supported range.
    """

    def __init__(self, glyphs, *, first=DEFAULT_FIRST):
        if not isinstance(first, int):
            cls = type(first).__name__
            raise TypeError(f"GlyphSet first code must be int, not '{cls}'")
        if first < 0:
            raise ValueError("GlyphSet first code must not be negative.")

        glyphs = [tuple(glyph) for glyph in glyphs]
        if not glyphs:
            raise ValueError("GlyphSet needs at least one glyph.")
        height = len(glyphs[0])
        if height < 1:
            raise ValueError("GlyphSet glyphs need at least one row.")
        for i, glyph in enumerate(glyphs):
            if len(glyph) != height:
                raise ValueError(
                    f"Glyph {i} has {len(glyph)} rows, expected {height}."
                )
            for row in glyph:
                if not isinstance(row, str):
                    cls = type(row).__name__
                    raise TypeError(f"Glyph rows must be str, not '{cls}'")

        # Store in an object array so that glyphs can be gathered by index
        rows = np.empty((len(glyphs), height), dtype=object)
        for i, glyph in enumerate(glyphs):
            rows[i, :] = glyph
        rows.flags.writeable = False

        self._rows = rows
        self._first = first

    def __repr__(self):
        return (
            f"<GlyphSet {self.count} glyphs of height {self.height} "
            f"from code {self.first} at 0x{id(self):x}>"
        )

    def __len__(self):
        return self._rows.shape[0]

    def __getitem__(self, code):
        """Get the glyph (a tuple of row strings) for the given code."""
        index = code - self._first
        if not 0 <= index < self.count:
            raise IndexError(f"Code {code} not in GlyphSet.")
        return tuple(self._rows[index])

    def __contains__(self, char):
        code = ord(char) if isinstance(char, str) else char
        return self._first <= code < self._first + self.count

    @property
    def first(self):
        """The code of the first glyph."""
        return self._first

    @property
    def count(self):
        """The number of glyphs."""
        return self._rows.shape[0]

    @property
    def height(self):
        """The number of rows per glyph."""
        return self._rows.shape[1]

    @property
    def rows(self):
        """The read-only array of shape (count, height) with the glyph rows."""
        return self._rows

    def glyph_indices(self, text):
        """Get an array with the glyph index for each character in the text.
        Characters outside the supported range get index 0 (the fallback glyph).
        """
        codes = np.fromiter((ord(c) for c in text), np.int64, len(text))
        indices = codes - self._first
        indices[(indices < 0) | (indices >= self.count)] = 0
        return indices

    def get_glyph(self, char):
        """Get the glyph for the given character, using the fallback glyph
        for characters outside the supported range.
        """
        index = int(self.glyph_indices(char)[0])
        return tuple(self._rows[index])


def _strip_line_ending(line):
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def parse_glyph_sheet(
    lines,
    *,
    height=DEFAULT_HEIGHT,
    first=DEFAULT_FIRST,
    count=DEFAULT_COUNT,
    filename=None,
):
    """Parse the lines of a glyph sheet into a GlyphSet.

    Parameters:
        lines (iterable): the raw lines of the font. One line ending
            per line (a trailing LF, then a trailing CR) is stripped.
        height (int): the number of rows per glyph.
        first (int): the code of the first glyph.
        count (int): the number of glyphs to read.
        filename (str, optional): only used in error messages.

    Raises FontTruncatedError when the sheet ends in the middle of a glyph,
    and FontIncompleteError when it holds fewer than ``count`` glyphs.
    Content after the last glyph is ignored.
    """
    if isinstance(lines, str):
        raise TypeError("parse_glyph_sheet() expects an iterable of lines, not str.")
    if height < 1 or count < 1:
        raise ValueError("Glyph height and count must be at least 1.")

    lines = [_strip_line_ending(line) for line in lines]
    nlines = len(lines)

    glyphs = []
    i = 0
    while len(glyphs) < count:
        # Skip leading blank lines
        while i < nlines and lines[i] == "":
            i += 1
        if i >= nlines:
            raise FontIncompleteError(len(glyphs), count, filename)
        if i + height > nlines:
            raise FontTruncatedError(len(glyphs), i, filename)
        glyphs.append(lines[i : i + height])
        i += height
        # A blank line after a glyph is a separator
        if i < nlines and lines[i] == "":
            i += 1

    if any(line for line in lines[i:]):
        logger.debug(f"Ignoring {nlines - i} lines after the last glyph.")

    return GlyphSet(glyphs, first=first)


def load_glyph_set(filename, **kwargs):
    """Load a GlyphSet from a font file. See ``parse_glyph_sheet()`` for
    the keyword arguments.
    """
    # Split on "\n" only, so a "\r" inside a row is kept
    with open(filename, "rt", encoding="utf-8", newline="\n") as f:
        lines = f.readlines()
    glyph_set = parse_glyph_sheet(lines, filename=filename, **kwargs)
    logger.debug(
        f"Loaded {glyph_set.count} glyphs of height {glyph_set.height} from {filename}"
    )
    return glyph_set
