"""Human-readable rendering of floating point values.

The strings produced here are meant for display: they may contain thin-space
thousands separators and the unicode minus sign, so the normal ``float()``
cannot read them back. Use ``numdisplay.utils.parsing.parse_f64`` instead.
"""

from __future__ import annotations

import math

import numpy as np

from ..utils.constants import DEGREE, INFINITY, MAX_DECIMALS, MINUS, NAN_TEXT
from ..utils.grouping import add_thousands_separators, add_thousands_separators_from_left
from .options import DEFAULT_F16, DEFAULT_F32, DEFAULT_F64, LAT_LON, FormatOptions


def _format_scientific(value: float, mantissa_decimals: int) -> str:
    # `1.50e20` rather than Python's `1.50e+20`
    mantissa, exponent = f"{value:.{mantissa_decimals}e}".split("e")
    return f"{mantissa}e{int(exponent)}"


def _strip_trailing_zeros(text: str) -> str:
    if "." not in text:
        return text
    return text.rstrip("0").rstrip(".")


def _group_digits(text: str, min_decimals_for_separators: int) -> str:
    integer_part, dot, fractional_part = text.partition(".")
    integer_part = add_thousands_separators(integer_part)
    if not dot:
        return integer_part
    if len(fractional_part) >= min_decimals_for_separators:
        fractional_part = add_thousands_separators_from_left(fractional_part)
    return f"{integer_part}.{fractional_part}"


def format_value(value: float, options: FormatOptions = DEFAULT_F64) -> str:
    """Format ``value`` according to ``options``.

    Never raises for NaN or infinite input:

    - NaN renders as ``"NaN"``.
    - Negative values get the ``MINUS`` glyph; ``-0.0`` shows no sign.
    - Infinity renders as ``"∞"`` (with a sign when negative or ``always_sign``).
    - Values whose integer part needs more digits than ``options.precision``
      switch to scientific notation, e.g. ``1.23456789012346e20``.
    - Otherwise fixed point, with as many decimals as the precision budget
      leaves after the integer digits (at most 16, and at most
      ``options.num_decimals`` when set). Rounding is Python's correctly
      rounded fixed-point conversion of the exact binary value.
    """
    value = float(value)
    if math.isnan(value):
        return NAN_TEXT

    if value < 0.0:
        sign = MINUS
    elif options.always_sign:
        sign = "+"
    else:
        sign = ""
    # also drops the sign bit of -0.0, which the fixed-point conversion would print
    value = abs(value)

    if math.isinf(value):
        return f"{sign}{INFINITY}"

    # log10(0) is -inf; zero has no integer digits to budget for
    magnitude = math.log10(value) if value > 0.0 else 0.0
    max_decimals_float = options.precision - max(magnitude, 0.0)

    if max_decimals_float < 0.0:
        # More integer digits than we have precision.
        return f"{sign}{_format_scientific(value, max(options.precision - 1, 0))}"

    max_decimals = min(math.floor(max_decimals_float), MAX_DECIMALS)
    if options.num_decimals is not None:
        num_decimals = max(min(options.num_decimals, max_decimals), 0)
    else:
        num_decimals = max_decimals

    formatted = f"{value:.{num_decimals}f}"
    if options.strip_trailing_zeros:
        formatted = _strip_trailing_zeros(formatted)

    return f"{sign}{_group_digits(formatted, options.min_decimals_for_thousands_separators)}"


def format_f64(value: float) -> str:
    """Format a number with about 15 digits of precision."""
    return format_value(value, DEFAULT_F64)


def format_f32(value: float) -> str:
    """Format a number as a float32, with about 7 digits of precision."""
    return format_value(float(np.float32(value)), DEFAULT_F32)


def format_f16(value: float) -> str:
    """Format a number as a float16, with about 5 digits of precision.

    Values beyond the float16 range become infinite.
    """
    with np.errstate(over="ignore"):
        narrowed = float(np.float16(value))
    return format_value(narrowed, DEFAULT_F16)


def format_lat_lon(value: float) -> str:
    """Format a latitude or longitude, e.g. ``+59.329444°``."""
    return f"{format_value(value, LAT_LON)}{DEGREE}"
