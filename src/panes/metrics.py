"""
Metrics providers: the measurement collaborator used by the text layout engine.

The layout engine never touches fonts directly. It asks a provider for the advance
width of characters and strings and for the line height of a font at a size. The font
argument can be any object the provider understands (a file path, a Win32 HFONT wrapper,
a Pillow font, ...); None means the provider's default font.
"""

from __future__ import annotations

import logging
from typing import Any

from . import constants

logger = logging.getLogger(__name__)

# Type for font objects - provider specific
FontObject = Any

# Approximate pixel widths at HEURISTIC_REFERENCE_SIZE
_NARROW_WIDTHS = (
	(' ', 4),
	('ij', 4),
	('Il1', 5),
	('frt', 6),
	('abcdeghknopqsuvxyz', 8),
	('ABCDEFGHIJKLMNOPQRSTUVXYZ', 10),
	('mw', 12),
	('MW', 14),
)


class MetricsProvider:
	"""Measurement interface, with a character-class heuristic as the default.

	Subclasses override `char_width` and `line_height` for real fonts. Override
	`advance_width` as well when the backend can measure whole strings (kerning).
	Measurements must be deterministic for fixed inputs.
	"""

	def char_width(self, font: FontObject, size: float, char: str) -> float:
		"""Advance width of a single character."""
		scale = size / constants.HEURISTIC_REFERENCE_SIZE
		for chars, width in _NARROW_WIDTHS:
			if char in chars:
				return width * scale
		code = ord(char)
		if code > 127:
			if 0x4E00 <= code <= 0x9FFF:
				return 16 * scale  # CJK
			if code >= 0x0100:
				return 10 * scale
		return 8 * scale

	def advance_width(self, font: FontObject, size: float, text: str) -> float:
		"""Advance width of a string. Defaults to the sum of its character widths."""
		return sum(self.char_width(font, size, char) for char in text)

	def line_height(self, font: FontObject, size: float) -> float:
		return size * constants.HEURISTIC_LINE_HEIGHT_RATIO


class MonospaceMetrics(MetricsProvider):
	"""Every character advances by the same fraction of the font size."""

	def __init__(self, advance_ratio=constants.MONOSPACE_ADVANCE_RATIO,
			line_height_ratio=constants.MONOSPACE_LINE_HEIGHT_RATIO):
		self.advance_ratio = advance_ratio
		self.line_height_ratio = line_height_ratio

	def char_width(self, font, size, char):
		return size * self.advance_ratio

	def advance_width(self, font, size, text):
		return len(text) * size * self.advance_ratio

	def line_height(self, font, size):
		return size * self.line_height_ratio


class CachedMetrics(MetricsProvider):
	"""Memoizes another provider's character widths and line heights.

	String widths are summed from cached character widths, so the wrapped provider
	should not rely on kerning. Fonts must be hashable.
	"""

	def __init__(self, provider: MetricsProvider):
		self.provider = provider
		self._widths: dict[tuple, float] = {}
		self._line_heights: dict[tuple, float] = {}

	def char_width(self, font, size, char):
		key = (font, size, char)
		if (width := self._widths.get(key)) is None:
			width = self._widths[key] = self.provider.char_width(font, size, char)
		return width

	def line_height(self, font, size):
		key = (font, size)
		if (height := self._line_heights.get(key)) is None:
			height = self._line_heights[key] = self.provider.line_height(font, size)
		return height

	def clear(self):
		logger.debug("Clearing %d cached widths", len(self._widths))
		self._widths.clear()
		self._line_heights.clear()

	def __len__(self):
		return len(self._widths)
