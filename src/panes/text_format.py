"""
Immutable text formatting attached to a run of text in a pane.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from . import colors, constants
from .metrics import FontObject


class HorizontalJustify(Enum):
	LEFT = 0.0
	CENTER = 0.5
	RIGHT = 1.0

	@property
	def fraction(self) -> float:
		"""Share of the free space placed before the line."""
		return self.value


class VerticalJustify(Enum):
	TOP = 0.0
	CENTER = 0.5
	BOTTOM = 1.0

	@property
	def fraction(self) -> float:
		return self.value


@dataclass(frozen=True)
class TextFormat:
	"""How a run of text is sized, aligned and colored.

	Builder methods return modified copies; a format is never changed in place.

	Attributes:
		font: Provider-specific font, or None for the provider's default font
		font_size: Size passed to the metrics provider
		horizontal: Justification of each line within the text area
		vertical: Justification of the block of lines within the text area
		line_spacing: Multiplier applied to the provider's line height
		first_line_indent: Spaces prepended to the first line of each paragraph
		lines_indent: Spaces prepended to the other lines of each paragraph
		color: RGBA text color
	"""
	font: FontObject = None
	font_size: float = constants.DEFAULT_FONT_SIZE
	horizontal: HorizontalJustify = HorizontalJustify.LEFT
	vertical: VerticalJustify = VerticalJustify.TOP
	line_spacing: float = constants.DEFAULT_LINE_SPACING
	first_line_indent: int = 0
	lines_indent: int = 0
	color: colors.Color = colors.WHITE

	def __post_init__(self):
		assert self.font_size >= 0, f"Font size cannot be negative: {self.font_size}"
		assert self.first_line_indent >= 0 and self.lines_indent >= 0, \
			"Indents cannot be negative"

	# --- horizontal justification

	def left(self) -> TextFormat:
		return replace(self, horizontal=HorizontalJustify.LEFT)

	def centered(self) -> TextFormat:
		return replace(self, horizontal=HorizontalJustify.CENTER)

	def right(self) -> TextFormat:
		return replace(self, horizontal=HorizontalJustify.RIGHT)

	# --- vertical justification

	def top(self) -> TextFormat:
		return replace(self, vertical=VerticalJustify.TOP)

	def middle(self) -> TextFormat:
		return replace(self, vertical=VerticalJustify.CENTER)

	def bottom(self) -> TextFormat:
		return replace(self, vertical=VerticalJustify.BOTTOM)

	def with_justification(self, horizontal: HorizontalJustify | None = None,
			vertical: VerticalJustify | None = None) -> TextFormat:
		return replace(self,
			horizontal=self.horizontal if horizontal is None else horizontal,
			vertical=self.vertical if vertical is None else vertical)

	# --- everything else

	def with_font(self, font: FontObject) -> TextFormat:
		return replace(self, font=font)

	def with_font_size(self, font_size: float) -> TextFormat:
		return replace(self, font_size=font_size)

	def with_line_spacing(self, line_spacing: float) -> TextFormat:
		return replace(self, line_spacing=line_spacing)

	def with_first_line_indent(self, indent: int) -> TextFormat:
		return replace(self, first_line_indent=indent)

	def with_lines_indent(self, indent: int) -> TextFormat:
		return replace(self, lines_indent=indent)

	def with_color(self, color: colors.Color) -> TextFormat:
		return replace(self, color=tuple(color))
