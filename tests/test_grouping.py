"""Tests for src/numdisplay/utils/grouping.py"""
from numdisplay.utils.constants import THIN_SPACE as S
from numdisplay.utils.grouping import add_thousands_separators, add_thousands_separators_from_left


class TestAddThousandsSeparators:
    def test_seven_digits(self):
        assert add_thousands_separators("1234567") == f"1{S}234{S}567"

    def test_empty(self):
        assert add_thousands_separators("") == ""

    def test_short_numbers_untouched(self):
        assert add_thousands_separators("1") == "1"
        assert add_thousands_separators("12") == "12"
        assert add_thousands_separators("123") == "123"

    def test_no_leading_separator_on_full_groups(self):
        assert add_thousands_separators("123456") == f"123{S}456"
        assert add_thousands_separators("123456789") == f"123{S}456{S}789"

    def test_four_digits(self):
        assert add_thousands_separators("1234") == f"1{S}234"


class TestGroupFromLeft:
    def test_groups_from_most_significant_digit(self):
        assert add_thousands_separators_from_left("1234567") == f"123{S}456{S}7"

    def test_exact_groups(self):
        assert add_thousands_separators_from_left("333333") == f"333{S}333"
