"""Small helpers shared by the game: a 2D vector, random ranges and score text."""

from __future__ import annotations

import random
from dataclasses import dataclass


@dataclass
class Vector2:
    """A pair of floats used for positions and paired speeds."""

    x: float = 0.0
    y: float = 0.0


def random_between(low: float, high: float, rng: random.Random | None = None) -> float:
    """Return a whole-number float offset from ``low`` within the integer span.

    Both bounds are truncated to integers to compute the span. The result is
    ``low`` plus a value in ``[0, |span|)``. A zero span is an error.
    """
    span = int(high) - int(low)
    if span == 0:
        raise ValueError(f"empty range: {low!r} .. {high!r}")
    source = rng if rng is not None else random
    return float(source.randrange(abs(span)) + low)


def int_to_string(num: int) -> str:
    """Render a non-negative score as decimal digits; negative scores render empty."""
    if num < 0:
        return ""
    return str(num)