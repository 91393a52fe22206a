"""
Text layout: word wrapping, block measurement and per-character positioning.

Every function here is a pure function of its arguments and the metrics provider.
Nothing is cached between calls, so identical inputs always give identical output.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from . import constants
from .geometry import Rect
from .metrics import MetricsProvider
from .text_format import TextFormat

logger = logging.getLogger(__name__)


class PositionedChar(NamedTuple):
	"""A character placed in layout space. (x, y) is the top-left of its cell."""
	char: str
	x: float
	y: float
	line: int


def line_height(format: TextFormat, metrics: MetricsProvider) -> float:
	"""Distance between consecutive line tops for this format."""
	return metrics.line_height(format.font, format.font_size) * format.line_spacing


def measure(text: str, format: TextFormat, metrics: MetricsProvider) -> float:
	if not text:
		return 0
	return metrics.advance_width(format.font, format.font_size, text)


def within(extent: float, available: float) -> bool:
	"""Whether a measured extent fits in the available space, allowing for float rounding."""
	return extent <= available + abs(available) * constants.FIT_TOLERANCE


def wrap(text: str, format: TextFormat, available_width: float, metrics: MetricsProvider) -> list[str]:
	"""Wrap text into lines no wider than `available_width` where possible.

	Whitespace is normalized: each line of `text` (split as by `str.splitlines`) is a
	paragraph wrapped on its own, and runs of spaces or tabs between words collapse to
	a single space, so a short line comes back equal to its normalized form rather than
	to the raw input. Words are added greedily while the measured line still fits; a
	word that does not fit even on an empty line is placed alone on its own line
	rather than being broken.

	Returns an empty list when the text contains no words at all.
	"""
	if not text or text.isspace():
		return []

	lines = []
	for paragraph in text.splitlines():
		words = paragraph.split()
		first_indent = " " * format.first_line_indent
		if not words:
			# Blank paragraph keeps its vertical space
			lines.append("")
			continue

		current = first_indent
		has_words = False
		for word in words:
			candidate = f"{current} {word}" if has_words else current + word
			if not has_words or within(measure(candidate, format, metrics), available_width):
				current = candidate
				has_words = True
				continue
			lines.append(current)
			current = " " * format.lines_indent + word

		lines.append(current)
	return lines


def text_size(lines: list[str], format: TextFormat, metrics: MetricsProvider) -> tuple[float, float]:
	"""Bounding (width, height) of a block of already-wrapped lines."""
	if not lines:
		return (0, 0)
	width = max(measure(line, format, metrics) for line in lines)
	return (width, len(lines) * line_height(format, metrics))


def position_chars(lines: list[str], format: TextFormat, area: Rect, metrics: MetricsProvider) -> list[PositionedChar]:
	"""Place every character of `lines` inside `area` according to the format's justification.

	The block of lines is offset vertically by the free space times the vertical
	fraction (0 top, 0.5 center, 1 bottom), and each line horizontally by its own free
	space times the horizontal fraction. Text taller or wider than the area simply
	overflows; negative offsets are kept as-is.
	"""
	area = Rect.coerce(area)
	step = line_height(format, metrics)
	block_height = len(lines) * step
	top = area.y + (area.height - block_height) * format.vertical.fraction

	positioned = []
	for index, line in enumerate(lines):
		line_width = measure(line, format, metrics)
		x = area.x + (area.width - line_width) * format.horizontal.fraction
		y = top + index * step
		# Prefix widths, so kerning providers place characters where the line width says
		for i, char in enumerate(line):
			positioned.append(PositionedChar(char, x + measure(line[:i], format, metrics), y, index))
	return positioned


def line_starts(lines: list[str], format: TextFormat, area: Rect, metrics: MetricsProvider) -> list[tuple[float, float]]:
	"""Top-left corner of each line, as used by position_chars."""
	area = Rect.coerce(area)
	step = line_height(format, metrics)
	top = area.y + (area.height - len(lines) * step) * format.vertical.fraction
	return [
		(area.x + (area.width - measure(line, format, metrics)) * format.horizontal.fraction, top + index * step)
		for index, line in enumerate(lines)
	]


def layout_text(text: str, format: TextFormat, area: Rect, metrics: MetricsProvider) -> list[PositionedChar]:
	"""Wrap `text` to the width of `area` and position its characters."""
	area = Rect.coerce(area)
	lines = wrap(text, format, area.width, metrics)
	return position_chars(lines, format, area, metrics)


def fits(text: str, format: TextFormat, area: Rect, metrics: MetricsProvider) -> bool:
	"""Whether text wrapped at the area's width stays inside the area."""
	area = Rect.coerce(area)
	width, height = text_size(wrap(text, format, area.width, metrics), format, metrics)
	return within(width, area.width) and within(height, area.height)


def fit_font_size(text: str, format: TextFormat, area: Rect, metrics: MetricsProvider,
		minimum: int = constants.MIN_FONT_SIZE, maximum: int | None = None) -> int:
	"""Find the largest integer font size at which the text fits inside `area`.

	Assumes that text which fits at some size also fits at every smaller size.
	`maximum` defaults to the area height, since no line can be taller than that.
	Returns `minimum` when the text does not fit even at the smallest size.
	"""
	area = Rect.coerce(area)
	if maximum is None:
		maximum = max(int(area.height), minimum)
	if maximum < minimum:
		raise ValueError(f"Font size maximum ({maximum}) is below minimum ({minimum})")

	low, high = minimum, maximum
	best = minimum
	while low <= high:
		size = (low + high) // 2
		if fits(text, format.with_font_size(size), area, metrics):
			best = size
			low = size + 1
		else:
			high = size - 1

	logger.debug("Best font size for %r in %r: %s", text[:20], area, best)
	return best
