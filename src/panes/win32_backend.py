"""
Win32 backend: GDI text measurement and drawing into a device context.

Windows only. Measurement uses a cached desktop DC; drawing goes to whatever HDC the
caller supplies (typically from BeginPaint in a WM_PAINT handler).
"""

from __future__ import annotations

import logging

import pywintypes
import win32api
import win32con
import win32gui

from . import colors
from .draw import Renderer
from .errors import FontLoadError
from .metrics import FontObject, MetricsProvider

logger = logging.getLogger(__name__)

DEFAULT_FACE_NAME = "Segoe UI"


def _colorref(color: colors.Color) -> int:
	r, g, b, _a = colors.to_rgba8(color)
	return win32api.RGB(r, g, b)


class Win32Metrics(MetricsProvider):
	"""GDI metrics. A `TextFormat.font` is a face name, or None for `face_name`."""

	def __init__(self, face_name: str = DEFAULT_FACE_NAME):
		self.face_name = face_name
		self._measurement_dc = None
		self._original_font = None
		self._fonts: dict[tuple[str, int], int] = {}
		self._widths: dict[tuple, float] = {}

	def _get_measurement_dc(self):
		"""Get cached measurement DC, creating one if needed."""
		if self._measurement_dc is None:
			self._measurement_dc = win32gui.GetDC(0)  # Desktop DC
			# Remember the original font so we can restore it at cleanup
			self._original_font = win32gui.GetCurrentObject(self._measurement_dc, win32con.OBJ_FONT)
		return self._measurement_dc

	def font_handle(self, font: FontObject, size: float) -> int:
		"""HFONT for a face name at a pixel size, created on first use."""
		face = self.face_name if font is None else font
		key = (face, max(1, int(round(size))))
		if (handle := self._fonts.get(key)) is not None:
			return handle

		logfont = win32gui.LOGFONT()
		logfont.lfFaceName = face
		logfont.lfHeight = -key[1]  # Negative: character height rather than cell height
		logfont.lfWeight = win32con.FW_NORMAL
		logfont.lfQuality = win32con.ANTIALIASED_QUALITY
		try:
			handle = win32gui.CreateFontIndirect(logfont)
		except pywintypes.error as exc:
			raise FontLoadError(face) from exc

		logger.debug("Created GDI font %r at %dpx", face, key[1])
		self._fonts[key] = handle
		return handle

	def _select(self, font, size):
		dc = self._get_measurement_dc()
		win32gui.SelectObject(dc, self.font_handle(font, size))
		return dc

	def char_width(self, font, size, char):
		key = (font, size, char)
		if (width := self._widths.get(key)) is None:
			cx, _cy = win32gui.GetTextExtentPoint32(self._select(font, size), char)
			width = self._widths[key] = float(cx)
		return width

	def line_height(self, font, size):
		metrics = win32gui.GetTextMetrics(self._select(font, size))
		return float(metrics['Height'] + metrics['ExternalLeading'])

	def close(self):
		"""Release the measurement DC and every font this provider created."""
		if getattr(self, '_measurement_dc', None) is not None:
			if self._original_font is not None:
				win32gui.SelectObject(self._measurement_dc, self._original_font)
			win32gui.ReleaseDC(0, self._measurement_dc)
			self._measurement_dc = None
			self._original_font = None
		for handle in getattr(self, '_fonts', {}).values():
			win32gui.DeleteObject(handle)
		self._fonts = {}

	def __del__(self):
		try:
			self.close()
		except pywintypes.error as exc:
			logger.warning("Error cleaning up measurement DC: %s", exc)


class DCRenderer(Renderer):
	"""Draws display list commands into a Win32 device context.

	Alpha is not blended: fully transparent fills are skipped by the display list
	and every other color is drawn opaque.
	"""

	def __init__(self, hdc: int, metrics: Win32Metrics):
		self.hdc = hdc
		self.metrics = metrics
		win32gui.SetBkMode(hdc, win32con.TRANSPARENT)

	def fill_rect(self, rect, color):
		if rect.width <= 0 or rect.height <= 0:
			return
		bounds = (int(rect.left), int(rect.top), int(round(rect.right)), int(round(rect.bottom)))
		brush = win32gui.CreateSolidBrush(_colorref(color))
		try:
			win32gui.FillRect(self.hdc, bounds, brush)
		finally:
			win32gui.DeleteObject(brush)

	def draw_glyph(self, char, position, font, size, color):
		win32gui.SelectObject(self.hdc, self.metrics.font_handle(font, size))
		win32gui.SetTextColor(self.hdc, _colorref(color))
		win32gui.ExtTextOut(self.hdc, int(round(position[0])), int(round(position[1])), 0, None, char)
