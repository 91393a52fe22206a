#!/usr/bin/env python3
"""
Unit tests for word wrapping, block measurement and character positioning.

A fixed-width metrics provider keeps the arithmetic readable: every character is as
wide as the font size and every line twice as tall, so at size 10 a character is
10 wide and a line is 20 tall.
"""

import unittest
import sys
import os

# Add the project root to the path so we can import from src
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)
sys.path.insert(0, os.path.join(project_root, 'src'))

from panes.geometry import Rect
from panes.metrics import MetricsProvider
from panes.text_format import TextFormat
from panes.text_layout import (fit_font_size, fits, layout_text, line_height, line_starts, measure,
                               position_chars, text_size, within, wrap)


class FixedMetrics(MetricsProvider):
    """Characters are `size` wide; lines are `2 * size` tall."""

    def char_width(self, font, size, char):
        return float(size)

    def line_height(self, font, size):
        return 2.0 * size


METRICS = FixedMetrics()
FORMAT = TextFormat(font_size=10)


class TestWrap(unittest.TestCase):
    """Test greedy word wrapping."""

    def test_short_text_is_one_line(self):
        self.assertEqual(wrap("Hello world", FORMAT, 1000, METRICS), ["Hello world"])

    def test_wraps_at_width(self):
        self.assertEqual(wrap("aaa bbb ccc", FORMAT, 70, METRICS), ["aaa bbb", "ccc"])

    def test_exact_fit_stays_on_line(self):
        self.assertEqual(wrap("aaa bbb ccc", FORMAT, 110, METRICS), ["aaa bbb ccc"])

    def test_collapses_repeated_spaces(self):
        self.assertEqual(wrap("  aaa    bbb ", FORMAT, 1000, METRICS), ["aaa bbb"])

    def test_empty_and_blank_text(self):
        self.assertEqual(wrap("", FORMAT, 100, METRICS), [])
        self.assertEqual(wrap("   \n  ", FORMAT, 100, METRICS), [])

    def test_long_word_sits_alone(self):
        """A word wider than the available width gets a line to itself and is not broken."""
        lines = wrap("a verylongword b", FORMAT, 50, METRICS)
        self.assertEqual(lines, ["a", "verylongword", "b"])

    def test_zero_width_puts_every_word_on_its_own_line(self):
        self.assertEqual(wrap("one two three", FORMAT, 0, METRICS), ["one", "two", "three"])

    def test_paragraphs(self):
        self.assertEqual(wrap("one\n\ntwo", FORMAT, 1000, METRICS), ["one", "", "two"])

    def test_each_paragraph_wraps_separately(self):
        lines = wrap("aaa bbb ccc\nddd", FORMAT, 70, METRICS)
        self.assertEqual(lines, ["aaa bbb", "ccc", "ddd"])

    def test_indents(self):
        format = FORMAT.with_first_line_indent(2).with_lines_indent(1)
        self.assertEqual(wrap("aa bb cc", format, 60, METRICS), ["  aa", " bb cc"])

    def test_short_text_comes_back_normalized(self):
        """Tabs and repeated spaces collapse, so the single line is the normalized input."""
        self.assertEqual(wrap("a  b\tc", FORMAT, 1000, METRICS), ["a b c"])

    def test_width_a_few_ulps_short_still_fits(self):
        """Split rects can be a rounding error narrower than the width text was measured at."""
        self.assertEqual(wrap("aaa bbb", FORMAT, 70 - 1e-12, METRICS), ["aaa bbb"])
        self.assertEqual(wrap("aaa bbb", FORMAT, 69.9, METRICS), ["aaa", "bbb"])

    def test_lines_fit_unless_single_word(self):
        text = "the quick brown fox jumps over the lazy dog and keeps running far away"
        for width in (30, 55, 80, 120, 300):
            with self.subTest(width=width):
                for line in wrap(text, FORMAT, width, METRICS):
                    if len(line.split()) > 1:
                        self.assertLessEqual(measure(line, FORMAT, METRICS), width)

    def test_rewrapping_is_idempotent(self):
        text = "the quick brown fox jumps over the lazy dog"
        lines = wrap(text, FORMAT, 100, METRICS)
        self.assertEqual(wrap(" ".join(lines), FORMAT, 100, METRICS), lines)

    def test_wrapping_keeps_every_word(self):
        text = "the quick brown fox jumps over the lazy dog"
        lines = wrap(text, FORMAT, 65, METRICS)
        self.assertEqual(" ".join(lines).split(), text.split())


class TestMeasurement(unittest.TestCase):
    """Test line heights and block sizes."""

    def test_line_height_uses_spacing(self):
        self.assertEqual(line_height(FORMAT, METRICS), 20)
        self.assertEqual(line_height(FORMAT.with_line_spacing(1.5), METRICS), 30)

    def test_text_size(self):
        self.assertEqual(text_size(["aaa bbb", "ccc"], FORMAT, METRICS), (70, 40))
        self.assertEqual(text_size([], FORMAT, METRICS), (0, 0))

    def test_within(self):
        self.assertTrue(within(44.03, 44.02999999999997))
        self.assertTrue(within(0, 0))
        self.assertFalse(within(44.03, 44.02))
        self.assertFalse(within(1, 0))

    def test_measure_empty(self):
        self.assertEqual(measure("", FORMAT, METRICS), 0)

    def test_fits(self):
        self.assertTrue(fits("aaa bbb ccc", FORMAT, Rect(0, 0, 70, 40), METRICS))
        self.assertFalse(fits("aaa bbb ccc", FORMAT, Rect(0, 0, 70, 39), METRICS))
        self.assertFalse(fits("verylongword", FORMAT, Rect(0, 0, 50, 100), METRICS))
        self.assertTrue(fits("aaa bbb ccc", FORMAT, Rect(0, 0, 70 - 1e-12, 40 - 1e-12), METRICS))


class KerningMetrics(FixedMetrics):
    """Every pair of neighbouring characters sits 2 units closer than their widths add up to."""

    def advance_width(self, font, size, text):
        if not text:
            return 0
        return len(text) * float(size) - 2 * (len(text) - 1)


class TestPositioning(unittest.TestCase):
    """Test per-character positions for every justification."""

    def xs(self, positioned):
        return [char.x for char in positioned]

    def test_left_top(self):
        positioned = position_chars(["abcd"], FORMAT, Rect(0, 0, 100, 50), METRICS)
        self.assertEqual([char.char for char in positioned], list("abcd"))
        self.assertEqual(self.xs(positioned), [0, 10, 20, 30])
        self.assertTrue(all(char.y == 0 and char.line == 0 for char in positioned))

    def test_centered(self):
        """A 40 wide line in a 100 wide area starts 30 in."""
        positioned = position_chars(["abcd"], FORMAT.centered(), Rect(0, 0, 100, 50), METRICS)
        self.assertEqual(self.xs(positioned), [30, 40, 50, 60])

    def test_right_with_offset_area(self):
        positioned = position_chars(["abcd"], FORMAT.right(), Rect(10, 5, 100, 50), METRICS)
        self.assertEqual(positioned[0].x, 70)
        self.assertEqual(positioned[-1].x + 10, 110)
        self.assertEqual(positioned[0].y, 5)

    def test_full_width_line_is_the_same_for_every_justification(self):
        line = ["a" * 10]
        area = Rect(0, 0, 100, 20)
        expected = self.xs(position_chars(line, FORMAT, area, METRICS))
        for format in (FORMAT.centered(), FORMAT.right()):
            self.assertEqual(self.xs(position_chars(line, format, area, METRICS)), expected)
        self.assertEqual(expected[0], 0)

    def test_vertical_justification(self):
        lines = ["a", "b"]
        area = Rect(0, 0, 100, 100)
        for format, tops in ((FORMAT.top(), [0, 20]), (FORMAT.middle(), [30, 50]), (FORMAT.bottom(), [60, 80])):
            with self.subTest(vertical=format.vertical):
                positioned = position_chars(lines, format, area, METRICS)
                self.assertEqual([char.y for char in positioned], tops)
                self.assertEqual([char.line for char in positioned], [0, 1])

    def test_each_line_justified_on_its_own(self):
        positioned = position_chars(["aaaa", "bb"], FORMAT.centered(), Rect(0, 0, 100, 100), METRICS)
        starts = {char.line: char.x for char in reversed(positioned)}
        self.assertEqual(starts, {0: 30, 1: 40})

    def test_overflow_is_not_clamped(self):
        """Text wider than its area starts before the area when centered."""
        positioned = position_chars(["a" * 12], FORMAT.centered(), Rect(0, 0, 100, 20), METRICS)
        self.assertEqual(positioned[0].x, -10)

    def test_line_starts_match_first_characters(self):
        lines = ["aaaa", "bb"]
        area = Rect(0, 0, 100, 100)
        format = FORMAT.right().middle()
        positioned = position_chars(lines, format, area, METRICS)
        firsts = [next(char for char in positioned if char.line == i) for i in range(2)]
        self.assertEqual(line_starts(lines, format, area, METRICS), [(char.x, char.y) for char in firsts])

    def test_layout_text_is_deterministic(self):
        text = "Nice weather we are having, isn't it?"
        area = Rect(0, 0, 120, 200)
        first = layout_text(text, FORMAT.centered().middle(), area, METRICS)
        second = layout_text(text, FORMAT.centered().middle(), area, METRICS)
        self.assertEqual(first, second)
        self.assertEqual(len(first), sum(len(line) for line in wrap(text, FORMAT, 120, METRICS)))

    def test_kerned_line_ends_on_area_edge(self):
        """Character positions use the same string measure as the line width."""
        kerning = KerningMetrics()
        positioned = position_chars(["abcd"], FORMAT.right(), Rect(0, 0, 100, 20), kerning)
        self.assertEqual(self.xs(positioned), [66, 76, 84, 92])
        self.assertEqual(positioned[0].x + measure("abcd", FORMAT, kerning), 100)

    def test_no_lines_no_characters(self):
        self.assertEqual(layout_text("", FORMAT, Rect(0, 0, 100, 100), METRICS), [])


class TestFitFontSize(unittest.TestCase):
    """Test the font size search."""

    def test_single_word(self):
        # 2 * size must fit both 100 wide and 50 tall
        self.assertEqual(fit_font_size("ab", FORMAT, Rect(0, 0, 100, 50), METRICS), 25)

    def test_width_bound(self):
        # "ab cd" on one line needs 5 * size <= 100; wrapping onto two lines needs 4 * size <= 50
        self.assertEqual(fit_font_size("ab cd", FORMAT, Rect(0, 0, 100, 50), METRICS), 20)

    def test_maximum_caps_result(self):
        self.assertEqual(fit_font_size("ab", FORMAT, Rect(0, 0, 100, 50), METRICS, maximum=12), 12)

    def test_minimum_when_nothing_fits(self):
        self.assertEqual(fit_font_size("verylongword", FORMAT, Rect(0, 0, 5, 5), METRICS, minimum=3), 3)

    def test_bad_range(self):
        with self.assertRaises(ValueError):
            fit_font_size("ab", FORMAT, Rect(0, 0, 100, 50), METRICS, minimum=10, maximum=5)


if __name__ == '__main__':
    unittest.main()
