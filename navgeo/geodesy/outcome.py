"""
Tagged outcomes for calculations with degenerate but valid geometry.

Functions such as intersection return None when there is no single answer;
their resolve_* counterparts return a Resolution saying why.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Outcome(Enum):
    """Why a calculation did or did not produce a value."""

    OK = "ok"
    COINCIDENT = "coincident"     # input points are the same point
    INFINITE = "infinite"         # paths coincide: infinitely many solutions
    AMBIGUOUS = "ambiguous"       # paths diverge: antipodal or 360° ambiguity
    NOT_REACHED = "not_reached"   # great circle never reaches the latitude

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Resolution:
    """
    Result of a calculation together with its outcome.

    Attributes:
        outcome: Outcome of the calculation
        value: The computed value, or None when there is none
    """

    outcome: Outcome
    value: Any = None

    @property
    def ok(self) -> bool:
        return self.value is not None

    def __bool__(self) -> bool:
        return self.ok
