"""Shortest-decimal rendering for interactive numeric controls.

Sliders and drag values should show as few decimals as possible while the
text still identifies the underlying value. The search below tries decimal
counts in ascending order and keeps the first one that parses back to
(almost) the same number.
"""

from __future__ import annotations

import logging
from typing import Sequence, Tuple, Union

import numpy as np

from ..utils.constants import MAX_DECIMALS, ROUND_TRIP_DECIMALS_LIMIT, ROUND_TRIP_EPSILON_FACTOR
from ..utils.parsing import parse_f64
from .formatting import format_value
from .options import DEFAULT_F64

logger = logging.getLogger(__name__)

# margin large enough to handle most round-tripping needs
ROUND_TRIP_EPSILON = float(ROUND_TRIP_EPSILON_FACTOR * np.finfo(np.float32).eps)

DecimalRange = Union[Tuple[int, int], Sequence[int], range]


def almost_equal(a: float, b: float, epsilon: float) -> bool:
    """Relative comparison of two float32 values.

    Values whose magnitude is at most ``epsilon`` always compare equal, and
    exactly equal values (including matching infinities) short-circuit.
    """
    with np.errstate(over="ignore", invalid="ignore"):
        a32 = np.float32(a)
        b32 = np.float32(b)
        if a32 == b32:
            return True
        abs_max = max(abs(a32), abs(b32))
        return bool(abs_max <= epsilon or abs(a32 - b32) / abs_max <= epsilon)


def _decimal_bounds(decimal_range: DecimalRange) -> Tuple[int, int]:
    if isinstance(decimal_range, range):
        return decimal_range.start, decimal_range.stop - 1
    min_decimals, max_decimals = decimal_range
    return int(min_decimals), int(max_decimals)


def _format_with_decimals(value: float, decimals: int) -> str:
    return DEFAULT_F64.with_decimals(decimals).with_strip_trailing_zeros(False).format(value)


def format_with_decimals_in_range(value: float, decimal_range: DecimalRange) -> str:
    """Format ``value`` with the fewest decimals in ``decimal_range`` that round-trip.

    ``decimal_range`` is an inclusive ``(min_decimals, max_decimals)`` pair; a
    ``range`` object is read as ``range.start .. range.stop - 1``. Requires
    ``min_decimals <= max_decimals < 100``. More than 16 decimals carry no
    information, so the upper bound is clamped to 16.

    When no shorter candidate parses back within tolerance, the value is shown
    at ``max_decimals`` without stripping trailing zeros.
    Small magnitudes may need more than ``max_decimals`` decimals to round-trip
    (2.1065512113045075e-06 in ``(0, 10)`` shows as ``0.000 002 106 6``); the
    fallback text is then the closest available and does not parse back
    within tolerance.
    """
    min_decimals, max_decimals = _decimal_bounds(decimal_range)
    assert min_decimals <= max_decimals, f"empty decimal range {min_decimals}..={max_decimals}"
    assert max_decimals < ROUND_TRIP_DECIMALS_LIMIT, f"max_decimals out of bounds: {max_decimals}"
    max_decimals = min(max_decimals, MAX_DECIMALS)
    min_decimals = min(min_decimals, max_decimals)

    if min_decimals < max_decimals:
        # Linear on purpose: round-trip success is not known to be monotonic in the decimal count.
        for decimals in range(min_decimals, max_decimals):
            text = _format_with_decimals(value, decimals)
            parsed = parse_f64(text)
            if parsed is not None and almost_equal(parsed, value, ROUND_TRIP_EPSILON):
                return text
        # Probably set from outside the widget rather than by dragging it.
        logger.debug(
            "%r does not round-trip with fewer than %d decimals; showing full value",
            value,
            max_decimals,
        )

    return _format_with_decimals(value, max_decimals)
