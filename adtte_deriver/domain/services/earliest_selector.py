from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from ..exceptions import MalformedInputError

if TYPE_CHECKING:
    from ..entities.records import Candidate


def select_earliest(candidates: Iterable[Candidate]) -> Candidate | None:
    """Return the candidate with the minimum date, or ``None`` if empty.

    Among candidates sharing the minimum date the first one in input order
    wins. Event precedence at a tied date therefore depends on the caller
    passing event sources ahead of censor sources; the selector itself
    knows nothing about kinds.
    """
    chosen: Candidate | None = None
    for candidate in candidates:
        if chosen is None or _earlier(candidate, chosen):
            chosen = candidate
    return chosen


def _earlier(candidate: Candidate, chosen: Candidate) -> bool:
    try:
        return bool(candidate.date < chosen.date)
    except TypeError as exc:
        raise MalformedInputError(
            f"Cannot compare dates {candidate.date!r} ({candidate.source.label()}) "
            f"and {chosen.date!r} ({chosen.source.label()}); "
            "date columns must be parsed to one date type"
        ) from exc

