"""Bounds-checked growth table lookups shared by the stat and skill engines."""

import math
from collections.abc import Sequence

Number = int | float


def growth_value(table: Sequence[Number | None], index: int) -> Number:
    """Look up one entry of a growth table.

    Any index outside the populated range, negative ones included, and any
    null entry count as no contribution.

    Args:
        table: The growth table for one progression axis
        index: 0-based position on that axis

    Returns:
        The entry, or 0 when there is none

    Examples:
        >>> growth_value([10, 20, 30], 1)
        20
        >>> growth_value([10, 20, 30], 5)
        0
        >>> growth_value([10, 20, 30], -1)
        0
    """
    if index < 0 or index >= len(table):
        return 0
    value = table[index]
    return 0 if value is None else value


def round_half_up(value: Number) -> int:
    """Round to the nearest integer, halves toward positive infinity.

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-2.5)
        -2
        >>> round_half_up(0.49999999999999994)
        0
    """
    whole = math.floor(value)
    return whole + 1 if value - whole >= 0.5 else whole
