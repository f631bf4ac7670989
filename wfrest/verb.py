"""HTTP verbs understood by the router."""

from __future__ import annotations

import enum


class Verb(enum.IntEnum):
    """HTTP verb of a route; ``ANY`` matches every method."""

    ANY = 0
    GET = 1
    POST = 2
    PUT = 3
    DELETE = 4
    HEAD = 5
    PATCH = 6


def str_to_verb(verb: str) -> Verb:
    """Map a method name, in any letter case, to a Verb; unknown names give ANY."""
    try:
        found = Verb[verb.upper()]
    except KeyError:
        return Verb.ANY
    return found


def verb_to_str(verb: Verb) -> str:
    """Return the upper-case name of a verb, or ``[UNKNOWN]`` for anything else."""
    try:
        return Verb(verb).name
    except ValueError:
        return "[UNKNOWN]"