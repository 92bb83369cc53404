"""Numeric helpers shared by the point and vector models.

Coordinates are displayed in their shortest round-tripping decimal form,
without an exponent and without a trailing ``.0``, so ``0.0`` renders as
``0`` and ``2.2`` stays ``2.2``.
"""

import math
from typing import Any

import numpy as np


def format_coordinate(value: float) -> str:
    """Render a coordinate for display.

    Example:
        >>> format_coordinate(0.0)
        '0'
        >>> format_coordinate(2.2)
        '2.2'
        >>> format_coordinate(1e-7)
        '0.0000001'
    """
    if math.isnan(value):
        return "NaN"
    return np.format_float_positional(value, trim="-")


def round_half_away_from_zero(value: float) -> float:
    """Round to the nearest integer, ties going away from zero.

    Python's built-in ``round`` uses banker's rounding (``round(2.5) == 2``);
    this keeps ``2.5 -> 3.0`` and ``-2.5 -> -3.0``. Non-finite values are
    returned unchanged.
    """
    if not math.isfinite(value):
        return value
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(float(whole), value)


def round_to_precision(value: float, precision: int) -> float:
    """Keep ``precision`` decimal digits of ``value``."""
    scale = 10.0**precision
    return round_half_away_from_zero(value * scale) / scale


def coerce_coordinate(value: Any) -> Any:
    """Turn an int coordinate into a float, rejecting bools.

    Used as a ``before`` validator on strict float fields, which on their own
    would let ``True`` through as ``1.0``.
    """
    if isinstance(value, bool):
        raise ValueError(f"Coordinate must be a number, received {value!r}")
    if isinstance(value, int):
        return float(value)
    return value
