"""A tiny CLI to print banners.

Invoke using e.g. ``python -m asciibanner "{Hello There}"`` or
``python -m asciibanner "Hello\\nThere" standard``.
"""

import sys
import argparse

import asciibanner
from asciibanner.utils import logger


def _is_font(name):
    try:
        asciibanner.find_font_file(name)
    except (FileNotFoundError, ValueError):
        return False
    return True


def _in_argv_order(argv, text, extras):
    # Merge the positional tokens and the unrecognized (dash) tokens back
    # into the order in which they were given.
    text, extras = list(text), list(extras)
    tokens = []
    for arg in argv:
        if text and arg == text[0]:
            tokens.append(text.pop(0))
        elif extras and arg == extras[0]:
            tokens.append(extras.pop(0))
    return tokens + text + extras


def main(argv=None):
    """Run the CLI. Returns the exit code."""
    if argv is None:
        argv = sys.argv[1:]

    # Only long options, so that text like "-x" or "-hello-" is never an option
    parser = argparse.ArgumentParser(
        prog="asciibanner",
        description="Print text as an ascii-art banner.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("text", nargs="*", help="The text to render")
    parser.add_argument(
        "--font",
        default=None,
        help="A font name or path to a font file "
        f"(default: {asciibanner.DEFAULT_FONT})",
    )
    parser.add_argument("--version", action="store_true", help="Show the version")
    parser.add_argument("--help", action="store_true", help="Show this help")

    # Usage errors (e.g. --font without a value) exit from within argparse
    try:
        args, extras = parser.parse_known_args(argv)
    except SystemExit as err:
        return err.code
    tokens = _in_argv_order(argv, args.text, extras)
    font = args.font

    if args.help:
        parser.print_help()
        return 0
    if args.version:
        print("asciibanner v" + asciibanner.__version__)
        return 0
    if not tokens:
        parser.print_usage(sys.stderr)
        return 1

    # The last token may name the font, if there is text left besides it
    if font is None:
        font = asciibanner.DEFAULT_FONT
        if len(tokens) >= 2 and _is_font(tokens[-1]):
            font = tokens.pop()

    try:
        glyph_set = asciibanner.load_font(font)
    except (OSError, ValueError) as err:
        logger.debug(f"Font {font!r} could not be loaded", exc_info=True)
        print(f"failed to load banner file {font!r}: {err}", file=sys.stderr)
        return 1

    text = asciibanner.sanitize_input(tokens)
    asciibanner.print_banner(glyph_set, text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
