"""
Turning the text given on the command line into the text to render.
"""


# Pairs of (opening, closing) characters that may wrap the whole text.
DELIMITER_PAIRS = (("{", "}"), ('"', '"'), ("'", "'"))


def sanitize_input(tokens):
    """Join the tokens with a space, strip one pair of wrapping braces or
    quotes, and convert literal "\\n" sequences into real newlines.

    A single string is treated as a single token. Other escape sequences are
    left as they are.
    """
    if isinstance(tokens, str):
        tokens = [tokens]
    text = " ".join(tokens)

    if len(text) >= 2:
        for opening, closing in DELIMITER_PAIRS:
            if text[0] == opening and text[-1] == closing:
                text = text[1:-1]
                break

    return text.replace("\\n", "\n")
