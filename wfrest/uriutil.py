"""Parsing of URL query strings."""

from __future__ import annotations

from wfrest.strutil import split_piece


def split_query(query: str) -> dict[str, str]:
    """Split ``a=1&b=2`` into a mapping ordered by key.

    Empty fields and fields with an empty key are skipped; the first
    occurrence of a key wins, and a key without ``=`` maps to ``""``.
    """
    result: dict[str, str] = {}
    for field in split_piece(query, "&"):
        if not field:
            continue
        key, *rest = split_piece(field, "=")
        if not key or key in result:
            continue
        result[key] = rest[0] if rest else ""
    return dict(sorted(result.items()))