"""Numeric display formatting: precision-budgeted, grouped, round-trip-minimal."""

from .core.frames import format_numeric_rows_from_df, format_series, format_series_in_range
from .core.formatting import format_f16, format_f32, format_f64, format_lat_lon, format_value
from .core.options import DEFAULT_F16, DEFAULT_F32, DEFAULT_F64, LAT_LON, FormatOptions
from .core.roundtrip import ROUND_TRIP_EPSILON, almost_equal, format_with_decimals_in_range
from .utils.constants import MINUS, THIN_SPACE
from .utils.grouping import add_thousands_separators
from .utils.parsing import parse_f64, strip_whitespace_and_normalize

__version__ = "0.1.0"

__all__ = [
    "FormatOptions",
    "DEFAULT_F16",
    "DEFAULT_F32",
    "DEFAULT_F64",
    "LAT_LON",
    "format_value",
    "format_f16",
    "format_f32",
    "format_f64",
    "format_lat_lon",
    "format_with_decimals_in_range",
    "almost_equal",
    "ROUND_TRIP_EPSILON",
    "parse_f64",
    "strip_whitespace_and_normalize",
    "add_thousands_separators",
    "MINUS",
    "THIN_SPACE",
    "format_series",
    "format_series_in_range",
    "format_numeric_rows_from_df",
]
