"""Closed numeric interval used to express operating limits."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NumberRange:
    """Inclusive interval ``[min, max]``.

    The bounds are stored exactly as given. A range whose ``min`` is greater
    than its ``max`` is accepted and simply contains nothing.
    """

    min: float
    max: float

    def contains(self, n: float) -> bool:
        return n >= self.min and n <= self.max

    def __contains__(self, n: float) -> bool:
        return self.contains(n)
