"""Decimal rounding on binary floats."""

from __future__ import annotations

import math


def round_half_away(value: float) -> float:
    """Round to the nearest integer, ties away from zero.

    Unlike :func:`round`, ``2.5`` becomes ``3.0`` and ``-2.5`` becomes
    ``-3.0``. NaN and infinities are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    fraction, whole = math.modf(abs(value))
    if fraction >= 0.5:
        whole += 1.0
    return math.copysign(whole, value)


def round_to_places(value: float, places: int) -> float:
    """Round *value* to *places* decimal digits, ties away from zero.

    Computed as ``round_half_away(value * 10**places) / 10**places`` on
    binary floats, so a literal like ``1.005`` (stored as
    ``1.00499999...``) rounds down. Negative *places* round to tens,
    hundreds, and so on. A scale factor that overflows to infinity or
    underflows to zero makes the result NaN, as IEEE arithmetic would.

    Examples:
        >>> round_to_places(0.2289, 2)
        0.23
        >>> round_to_places(2.5, 0)
        3.0
    """
    try:
        divisor = math.pow(10.0, places)
    except OverflowError:
        divisor = math.inf if places > 0 else 0.0
    if divisor == 0.0 or math.isinf(divisor):
        return math.nan
    return round_half_away(value * divisor) / divisor
