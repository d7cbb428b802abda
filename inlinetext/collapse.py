"""Whitespace normalisation for inline text."""

import re

__all__ = ["collapse"]

# ASCII whitespace: space, tab, line feed, form feed, carriage return.
_ASCII_WHITESPACE = re.compile(r"[ \t\n\x0c\r]+")


def collapse(text: str) -> str:
    """Trim ASCII whitespace and squeeze every inner run of it to one space.

    >>> collapse("  SELECT *\\n    FROM t;  ")
    'SELECT * FROM t;'
    """
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")
    return " ".join(word for word in _ASCII_WHITESPACE.split(text) if word)