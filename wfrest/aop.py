"""Run aspect hooks around a request handler."""

from __future__ import annotations

from typing import Any, Iterable, Protocol, Sequence


class _Aspect(Protocol):
    def before(self, req: Any, resp: Any) -> bool: ...

    def after(self, req: Any, resp: Any) -> bool: ...


def aop_before(req: Any, resp: Any, aspects: Iterable[_Aspect]) -> bool:
    """Call ``before`` on each aspect in order, stopping at the first that fails."""
    return all(aspect.before(req, resp) for aspect in aspects)


def aop_after(req: Any, resp: Any, aspects: Sequence[_Aspect]) -> bool:
    """Call ``after`` on each aspect in reverse order, stopping at the first that fails."""
    return all(aspect.after(req, resp) for aspect in reversed(list(aspects)))