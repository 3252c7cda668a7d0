"""Parsing of displayed numbers back into floats."""

from typing import Optional

from .constants import MINUS


def strip_whitespace_and_normalize(text: str) -> str:
    """Prepare a string containing a number for parsing.

    Drops all whitespace (leading, trailing and thousands separators) and
    replaces the special minus character with a normal hyphen.
    """
    return "".join(ch for ch in text if not ch.isspace()).replace(MINUS, "-")


def parse_f64(text: str) -> Optional[float]:
    """Parse a number, ignoring whitespace and treating ``MINUS`` as a minus sign.

    Returns None when the text is not a number.
    """
    try:
        return float(strip_whitespace_and_normalize(text))
    except (TypeError, ValueError):
        return None
