"""Formatting options and the named presets."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class FormatOptions:
    """Options for how to format a floating point number.

    Instances are immutable; the ``with_*`` helpers return modified copies
    so presets can be specialised inline::

        DEFAULT_F64.with_decimals(3).with_always_sign(True).format(1.5)
    """

    # Always show the sign, even if it is positive (`+`).
    always_sign: bool = False
    # Maximum digits of precision, integer part and fractional part together.
    precision: int = 15
    # Max number of decimals after the decimal point; derived from precision when None.
    num_decimals: Optional[int] = None
    strip_trailing_zeros: bool = True
    # Only add thousands separators to decimals if there are at least this many decimals.
    min_decimals_for_thousands_separators: int = 6

    def with_always_sign(self, always_sign: bool) -> "FormatOptions":
        return replace(self, always_sign=always_sign)

    def with_precision(self, precision: int) -> "FormatOptions":
        """Show at most this many digits, counting integer and fractional parts."""
        return replace(self, precision=precision)

    def with_decimals(self, num_decimals: int) -> "FormatOptions":
        """Max number of decimals to show; clamped to what the precision allows."""
        return replace(self, num_decimals=num_decimals)

    def with_strip_trailing_zeros(self, strip_trailing_zeros: bool) -> "FormatOptions":
        return replace(self, strip_trailing_zeros=strip_trailing_zeros)

    def format(self, value: float) -> str:
        """Format ``value`` with these options. The result is for human eyes only."""
        from .formatting import format_value

        return format_value(value, self)


# Precision approximates the decimal digits each float width represents unambiguously.
DEFAULT_F16 = FormatOptions(precision=5)
DEFAULT_F32 = FormatOptions(precision=7)
DEFAULT_F64 = FormatOptions(precision=15)

LAT_LON = FormatOptions(
    always_sign=True,
    precision=10,
    num_decimals=6,
    strip_trailing_zeros=False,
    min_decimals_for_thousands_separators=10,
)

PRESETS = {
    "f16": DEFAULT_F16,
    "f32": DEFAULT_F32,
    "f64": DEFAULT_F64,
}
