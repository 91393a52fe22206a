"""
Exceptions raised by the pane layout engine and its backends.

Geometry problems are never errors: degenerate layouts produce zero-extent rects and
empty line lists. Only collaborator failures (fonts, glyphs, drawing) are raised,
and the core lets them propagate untouched.
"""


class PaneError(Exception):
	"""Base class for errors raised by this package."""


class MetricsError(PaneError):
	"""A metrics provider or renderer could not measure or draw text."""


class FontLoadError(MetricsError):
	"""A font could not be loaded by a backend."""

	def __init__(self, font, message: str | None = None):
		self.font = font
		super().__init__(message or f"Could not load font {font!r}")
