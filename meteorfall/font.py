"""Seven-segment glyphs for the digits 0-9.

Segments are numbered: 0 top, 1 upper left, 2 upper right, 3 middle,
4 lower left, 5 lower right, 6 bottom.
"""

from __future__ import annotations

SEGMENT_COUNT = 7

DIGITS: tuple[tuple[int, ...], ...] = (
    (1, 1, 1, 0, 1, 1, 1),
    (0, 0, 1, 0, 0, 1, 0),
    (1, 0, 1, 1, 1, 0, 1),
    (1, 0, 1, 1, 0, 1, 1),
    (0, 1, 1, 1, 0, 1, 0),
    (1, 1, 0, 1, 0, 1, 1),
    (1, 1, 0, 1, 1, 1, 1),
    (1, 0, 1, 0, 0, 1, 0),
    (1, 1, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 0, 1, 1),
)


def lit_segments(digit: int) -> tuple[int, ...]:
    """Return the indices of the segments lit for ``digit``."""
    if not 0 <= digit < len(DIGITS):
        raise ValueError(f"not a decimal digit: {digit!r}")
    return tuple(index for index, lit in enumerate(DIGITS[digit]) if lit)