"""String trimming and splitting helpers."""

from __future__ import annotations

K_PAIRS = "{}[]()<>\"\"''``"

_C_SPACE = " \t\n\v\f\r"
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def trim_pairs(text: str, pairs: str = K_PAIRS) -> str:
    """Strip one matching pair of enclosing characters, such as quotes or brackets.

    ``pairs`` lists opening and closing characters two at a time.
    """
    if len(text) < 2:
        return text
    first, last = text[0], text[-1]
    for opening, closing in zip(pairs[0::2], pairs[1::2]):
        if first == opening and last == closing:
            return text[1:-1]
    return text


def ltrim(text: str) -> str:
    """Strip leading whitespace."""
    return text.lstrip(_C_SPACE)


def rtrim(text: str) -> str:
    """Strip trailing whitespace."""
    return text.rstrip(_C_SPACE)


def trim(text: str) -> str:
    """Strip whitespace at both ends."""
    return ltrim(rtrim(text))


def split_piece(text: str, sep: str) -> list[str]:
    """Split on ``sep``, keeping empty fields; an empty string gives no fields."""
    if not text:
        return []
    return text.split(sep)


def caseless_key(text: str) -> str:
    """Key for ordering strings without regard to ASCII letter case."""
    return text.translate(_ASCII_LOWER)