"""
Pillow backend: FreeType glyph metrics and drawing onto PIL images.

`PillowGlyphs` measures text with Pillow's FreeType fonts, and `ImageRenderer` draws a
pane tree's display list through a caller-supplied `ImageDraw`. Creating, saving or
otherwise managing the image itself is left to the caller.
"""

from __future__ import annotations

import io
import logging
import os

from PIL import ImageDraw, ImageFont

from . import colors
from .draw import Renderer
from .errors import FontLoadError
from .metrics import FontObject, MetricsProvider

logger = logging.getLogger(__name__)

FontSource = str | os.PathLike | bytes | ImageFont.FreeTypeFont | None


def _pixel_size(size: float) -> int:
	return max(1, int(round(size)))


class PillowGlyphs(MetricsProvider):
	"""Glyph metrics from a TrueType/OpenType font loaded by Pillow.

	The provider has a default font source (a path, raw font bytes, a loaded
	FreeTypeFont, or None for Pillow's bundled default font). A `TextFormat.font` of
	None uses that default; any other value is treated as another font source.
	Loaded fonts and character widths are cached per provider.
	"""

	def __init__(self, source: FontSource = None, *, index: int = 0):
		self.source = source
		self.index = index
		self._fonts: dict[tuple, ImageFont.FreeTypeFont] = {}
		self._widths: dict[tuple, float] = {}

	@classmethod
	def from_path(cls, path: str | os.PathLike, *, index: int = 0) -> PillowGlyphs:
		return cls(os.fspath(path), index=index)

	@classmethod
	def from_bytes(cls, data: bytes, *, index: int = 0) -> PillowGlyphs:
		return cls(bytes(data), index=index)

	@classmethod
	def load_default(cls) -> PillowGlyphs:
		"""Use the font bundled with Pillow."""
		return cls(None)

	def font_for(self, font: FontObject, size: float) -> ImageFont.FreeTypeFont:
		"""Load (or fetch from cache) the Pillow font for a format's font and size."""
		source = self.source if font is None else font
		pixels = _pixel_size(size)
		key = (source, pixels)
		if (loaded := self._fonts.get(key)) is not None:
			return loaded

		try:
			if source is None:
				loaded = ImageFont.load_default(size=pixels)
			elif isinstance(source, ImageFont.FreeTypeFont):
				loaded = source.font_variant(size=pixels)
			elif isinstance(source, bytes):
				loaded = ImageFont.truetype(io.BytesIO(source), pixels, index=self.index)
			else:
				loaded = ImageFont.truetype(os.fspath(source), pixels, index=self.index)
		except OSError as exc:
			raise FontLoadError(source) from exc

		logger.debug("Loaded font %r at %dpx", source if not isinstance(source, bytes) else "<bytes>", pixels)
		self._fonts[key] = loaded
		return loaded

	def char_width(self, font, size, char):
		key = (font, size, char)
		if (width := self._widths.get(key)) is None:
			width = self._widths[key] = float(self.font_for(font, size).getlength(char))
		return width

	def line_height(self, font, size):
		loaded = self.font_for(font, size)
		if hasattr(loaded, 'getmetrics'):
			ascent, descent = loaded.getmetrics()
			return float(ascent + descent)
		# Bitmap fonts have no vertical metrics
		left, top, right, bottom = loaded.getbbox("Ag")
		return float(bottom)


class ImageRenderer(Renderer):
	"""Draws display list commands onto a PIL image through `ImageDraw`."""

	def __init__(self, draw: ImageDraw.ImageDraw, glyphs: PillowGlyphs):
		self.draw = draw
		self.glyphs = glyphs

	def fill_rect(self, rect, color):
		if rect.width <= 0 or rect.height <= 0:
			return
		# Pillow rectangles include their far edge; keep neighbouring panes from overlapping
		self.draw.rectangle(
			(rect.left, rect.top, max(rect.left, rect.right - 1), max(rect.top, rect.bottom - 1)),
			fill=colors.to_rgba8(color),
		)

	def draw_glyph(self, char, position, font, size, color):
		self.draw.text(position, char, font=self.glyphs.font_for(font, size), fill=colors.to_rgba8(color))
