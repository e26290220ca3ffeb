"""
Test cases for page specification parsing.
"""

import unittest

from pdf_shuffle.exceptions import InvalidPageRangeError, PageSpecError
from pdf_shuffle.page_spec import format_page_list, parse_page_spec


class TestParsePageSpec(unittest.TestCase):
    """Test cases for parse_page_spec."""

    def test_mixed_pages_and_ranges(self):
        """Test the canonical example with single pages and a range."""
        self.assertEqual(parse_page_spec("1, 3, 5-10"), [1, 3, 5, 6, 7, 8, 9, 10])

    def test_single_page(self):
        self.assertEqual(parse_page_spec("4"), [4])

    def test_order_is_preserved(self):
        """Test that pages keep the user's order instead of being sorted."""
        self.assertEqual(parse_page_spec("9, 2-4, 1"), [9, 2, 3, 4, 1])

    def test_duplicates_are_preserved(self):
        self.assertEqual(parse_page_spec("3,1,1"), [3, 1, 1])
        self.assertEqual(parse_page_spec("1-3, 2"), [1, 2, 3, 2])

    def test_single_page_range(self):
        self.assertEqual(parse_page_spec("5-5"), [5])

    def test_whitespace_is_ignored(self):
        self.assertEqual(parse_page_spec("  2 ,4 - 6  "), [2, 4, 5, 6])

    def test_no_bounds_checking(self):
        """Test that large numbers pass; bounds are checked by the assembler."""
        self.assertEqual(parse_page_spec("1000"), [1000])

    def test_empty_string(self):
        with self.assertRaises(PageSpecError) as cm:
            parse_page_spec("")
        self.assertIn("cannot be empty", str(cm.exception))

    def test_blank_string(self):
        with self.assertRaises(PageSpecError):
            parse_page_spec("   ")

    def test_start_greater_than_end(self):
        with self.assertRaises(PageSpecError) as cm:
            parse_page_spec("3-1")
        self.assertIn("must be <=", str(cm.exception))

    def test_non_numeric(self):
        with self.assertRaises(PageSpecError):
            parse_page_spec("a,b")

    def test_one_bad_component_fails_everything(self):
        with self.assertRaises(PageSpecError):
            parse_page_spec("1, 2, x, 4")

    def test_malformed_ranges(self):
        for spec in ("1-5-10", "-3", "3-", "1--2", "1-a"):
            with self.subTest(spec=spec):
                with self.assertRaises(PageSpecError):
                    parse_page_spec(spec)

    def test_zero_is_rejected(self):
        with self.assertRaises(PageSpecError) as cm:
            parse_page_spec("0")
        self.assertIn("must be >= 1", str(cm.exception))

    def test_empty_component(self):
        with self.assertRaises(PageSpecError):
            parse_page_spec("1,,3")
        with self.assertRaises(PageSpecError):
            parse_page_spec("1,")

    def test_decimal_and_signed_numbers(self):
        for spec in ("1.5", "+2", "2e1"):
            with self.subTest(spec=spec):
                with self.assertRaises(PageSpecError):
                    parse_page_spec(spec)

    def test_spec_error_is_a_page_range_error(self):
        with self.assertRaises(InvalidPageRangeError):
            parse_page_spec("nope")


class TestFormatPageList(unittest.TestCase):
    """Test cases for format_page_list."""

    def test_collapses_ascending_runs(self):
        self.assertEqual(format_page_list([1, 2, 3, 7]), "1-3, 7")

    def test_keeps_order_and_repeats(self):
        self.assertEqual(format_page_list([3, 1, 1, 2]), "3, 1, 1-2")

    def test_descending_pages_are_not_collapsed(self):
        self.assertEqual(format_page_list([3, 2, 1]), "3, 2, 1")

    def test_empty(self):
        self.assertEqual(format_page_list([]), "")

    def test_parses_back_to_the_same_pages(self):
        pages = [5, 6, 7, 1, 9, 10, 10]
        self.assertEqual(parse_page_spec(format_page_list(pages)), pages)


if __name__ == '__main__':
    unittest.main()
