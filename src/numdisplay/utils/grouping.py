"""Thousands-separator insertion for digit strings."""

from .constants import GROUP_SIZE, THIN_SPACE


def add_thousands_separators(number: str) -> str:
    """Insert a thin space every three characters, counting from the last one.

    ``"1234567"`` becomes ``"1 234 567"`` (with ``THIN_SPACE``). The input is
    expected to be bare digits: grouping an already grouped string counts the
    separators as characters and is not idempotent.
    """
    groups = []
    end = len(number)
    while end > 0:
        start = max(end - GROUP_SIZE, 0)
        groups.append(number[start:end])
        end = start
    return THIN_SPACE.join(reversed(groups))


def add_thousands_separators_from_left(fraction: str) -> str:
    """Group a fractional part counting from its first (most significant) digit."""
    return add_thousands_separators(fraction[::-1])[::-1]
