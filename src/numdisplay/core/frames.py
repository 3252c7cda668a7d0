"""Formatting helpers for pandas/NumPy containers."""

from typing import Any, List

import numpy as np
import pandas as pd

from .formatting import format_value
from .options import DEFAULT_F64, FormatOptions
from .roundtrip import DecimalRange, format_with_decimals_in_range


def to_float_np(values: Any) -> np.ndarray:
    """Convert a pandas Series/array-like to a float NumPy array.

    Entries that are not numbers become NaN, so they render as ``"NaN"``.
    """
    return pd.to_numeric(pd.Series(values), errors="coerce").astype(float).to_numpy()


def _index_of(values: Any):
    return values.index if isinstance(values, pd.Series) else None


def format_series(values: Any, options: FormatOptions = DEFAULT_F64) -> pd.Series:
    """Format every value with ``options``; a Series keeps its index and name."""
    arr = to_float_np(values)
    return pd.Series(
        [format_value(v, options) for v in arr],
        index=_index_of(values),
        name=getattr(values, "name", None),
        dtype=object,
    )


def format_series_in_range(values: Any, decimal_range: DecimalRange) -> pd.Series:
    """Shortest round-tripping rendering of every value, see ``format_with_decimals_in_range``."""
    arr = to_float_np(values)
    return pd.Series(
        [format_with_decimals_in_range(v, decimal_range) for v in arr],
        index=_index_of(values),
        name=getattr(values, "name", None),
        dtype=object,
    )


def format_numeric_rows_from_df(
    df: pd.DataFrame, headers: List[str], options: FormatOptions = DEFAULT_F64
) -> List[List[str]]:
    """Render ``df[headers]`` as rows of display strings.

    Float columns go through the formatter; everything else uses ``str()``.
    """
    float_cols = {col for col in headers if pd.api.types.is_float_dtype(df[col])}
    out_rows: List[List[str]] = []
    for row in df[headers].itertuples(index=False, name=None):
        out_row: List[str] = []
        for col, val in zip(headers, row):
            if col in float_cols:
                out_row.append(format_value(float(val), options))
            else:
                out_row.append(str(val))
        out_rows.append(out_row)
    return out_rows
