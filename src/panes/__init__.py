"""
Rectangular pane layout with justified, wrapped text.

Panes (which may have smaller child panes) are described with immutable builders,
resolved into rectangles, and the position of every character of their text is
computed against a pluggable metrics provider. Drawing is delegated to a renderer.
"""

from . import colors
from .draw import DrawGlyph, DrawRect, RecordingRenderer, Renderer, display_list, draw, dump_pane_rects, text_positions, walk
from .errors import FontLoadError, MetricsError, PaneError
from .geometry import IDENTITY, Orientation, Rect, Transform
from .metrics import CachedMetrics, MetricsProvider, MonospaceMetrics
from .pane import EMPTY, Child, Children, Contents, Empty, Pane, Text
from .resolver import child_rects, content_size, fit_fonts, fit_text, resolve
from .text_format import HorizontalJustify, TextFormat, VerticalJustify
from .text_layout import PositionedChar, fit_font_size, layout_text, position_chars, text_size, wrap

__all__ = [
	"colors",
	"Rect", "Orientation", "Transform", "IDENTITY",
	"MetricsProvider", "MonospaceMetrics", "CachedMetrics",
	"TextFormat", "HorizontalJustify", "VerticalJustify",
	"PositionedChar", "wrap", "text_size", "position_chars", "layout_text", "fit_font_size",
	"Pane", "Contents", "Empty", "Text", "Children", "Child", "EMPTY",
	"resolve", "child_rects", "content_size", "fit_text", "fit_fonts",
	"walk", "text_positions", "dump_pane_rects", "display_list", "draw",
	"DrawRect", "DrawGlyph", "Renderer", "RecordingRenderer",
	"PaneError", "MetricsError", "FontLoadError",
]
