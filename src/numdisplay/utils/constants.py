"""Shared constants that don't depend on external packages.

This module contains glyphs and limits used by the formatter, the parser
and the round-trip search, kept apart so utils modules can import them
without pulling in core.
"""

# Display glyphs
MINUS = "\u2212"        # the minus character, looks slightly different from the hyphen `-`
THIN_SPACE = "\u2009"   # thousands separator, like `1 234`
INFINITY = "\u221e"
DEGREE = "\u00b0"
NAN_TEXT = "NaN"

# Precision/formatting limits
MAX_DECIMALS = 16                 # no information is representable beyond this at 64-bit precision
ROUND_TRIP_DECIMALS_LIMIT = 100   # exclusive upper bound accepted by the round-trip search
ROUND_TRIP_EPSILON_FACTOR = 16    # tolerance in units of float32 machine epsilon
GROUP_SIZE = 3                    # digits per thousands group
