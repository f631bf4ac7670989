"""Percent-encoding of URL paths."""

from __future__ import annotations

import re
import string

_SAFE = frozenset((string.ascii_letters + string.digits + "-._~/").encode("ascii"))
_HEX = "0123456789ABCDEF"
_ESCAPE = re.compile(rb"%(.{2})|\+", re.DOTALL)
_HEX_PREFIX = re.compile(rb"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


def _encode_bytes(value: str) -> bytes:
    return value.encode("utf-8", "surrogateescape")


def url_encode(value: str) -> str:
    """Percent-encode every byte except letters, digits and ``-._~/``."""
    return "".join(
        chr(byte) if byte in _SAFE else f"%{_HEX[byte >> 4]}{_HEX[byte & 15]}"
        for byte in _encode_bytes(value)
    )


def _hex_byte(pair: bytes) -> int:
    """Read a leading hex number the way ``strtol`` with base 16 does."""
    match = _HEX_PREFIX.match(pair)
    digits = match.group(2) if match else b""
    number = int(digits, 16) if digits else 0
    if match and match.group(1) == b"-":
        number = -number
    return number & 0xFF


def _replace(match: re.Match) -> bytes:
    pair = match.group(1)
    if pair is None:
        return b" "
    return bytes((_hex_byte(pair),))


def url_decode(value: str) -> str:
    """Undo percent-encoding and turn ``+`` into a space."""
    decoded = _ESCAPE.sub(_replace, _encode_bytes(value))
    return decoded.decode("utf-8", "surrogateescape")


def is_url_encode(text: str) -> bool:
    """Tell whether a string looks percent-encoded."""
    return "%" in text or "+" in text