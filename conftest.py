"""Global configuration for pytest"""

import numpy as np
import pytest


@pytest.fixture(autouse=True, scope="session")
def numerical_exceptions():
    """
    Ensure any numerical errors raise a warning in our test suite
    The point is that we enforce such cases to be handled explicitly in our code
    """
    np.seterr(all="raise")


@pytest.fixture(autouse=True)
def no_user_font_dir(monkeypatch):
    """Make sure a user's font dir does not affect font lookup in the tests."""
    monkeypatch.delenv("ASCIIBANNER_FONT_DIR", raising=False)


def glyph_rows(code, height):
    """The rows of a recognizable test glyph: e.g. "A0", "A1", ..."""
    return [f"{chr(code)}{h}" for h in range(height)]


@pytest.fixture
def make_sheet():
    """Get a function that produces the lines of a test glyph sheet."""

    def make_sheet(count=95, height=8, first=32, separator=True, leading=1):
        lines = [""] * leading
        for code in range(first, first + count):
            lines.extend(glyph_rows(code, height))
            if separator:
                lines.append("")
        return lines

    return make_sheet
