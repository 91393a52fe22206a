"""
Query and drawing facade over resolved pane trees.

Nothing here rasterizes. A resolved tree is turned into a display list of draw
commands, which a `Renderer` (an image, a device context, a test recorder, ...)
executes. A caller-supplied affine transform is applied to every rect and position
in the display list, so renderers work purely in their own coordinates.
"""

from __future__ import annotations

import logging
from typing import Iterator, NamedTuple, Union

from . import colors
from .geometry import IDENTITY, Rect, Transform
from .metrics import FontObject, MetricsProvider
from .pane import Children, Empty, Pane, Text
from .text_layout import PositionedChar, layout_text

logger = logging.getLogger(__name__)

# -------
# Queries
# -------

def walk(pane: Pane) -> Iterator[tuple[int, Pane]]:
	"""Yield (depth, pane) for every pane in the tree, parents before children."""
	stack = [(0, pane)]
	while stack:
		depth, current = stack.pop()
		yield depth, current
		stack.extend((depth + 1, child) for child in reversed(current.children))


def text_positions(pane: Pane, metrics: MetricsProvider) -> list[PositionedChar]:
	"""Positioned characters of a text pane inside its inner rect.

	Panes without text have no characters. The pane should already be resolved.
	"""
	contents = pane.contents
	if isinstance(contents, Text):
		return layout_text(contents.text, contents.format, pane.inner_rect, metrics)
	elif isinstance(contents, (Empty, Children)):
		return []
	raise TypeError(f"Unknown pane contents: {type(contents).__name__}")


def dump_pane_rects(pane: Pane, indent: str = "  ") -> str:
	"""Describe the resolved geometry of a tree, one pane per line."""
	lines = []
	for depth, current in walk(pane):
		x, y, width, height = current.rect
		kind = type(current.contents).__name__
		detail = f" {current.text!r}" if current.text is not None else ""
		lines.append(f"{indent * depth}{kind}: x={x:g}, y={y:g}, width={width:g}, height={height:g}{detail}")
	return "\n".join(lines)

# -------
# Display list
# -------

class DrawRect(NamedTuple):
	rect: Rect
	color: colors.Color


class DrawGlyph(NamedTuple):
	char: str
	x: float
	y: float
	font: FontObject
	size: float
	color: colors.Color

	@property
	def position(self) -> tuple[float, float]:
		return (self.x, self.y)


DrawCommand = Union[DrawRect, DrawGlyph]


def display_list(pane: Pane, metrics: MetricsProvider, transform: Transform = IDENTITY) -> list[DrawCommand]:
	"""Build the draw commands for a resolved tree.

	Backgrounds are emitted before anything drawn on top of them: a pane's rect, then
	its text, then its children in order. Whitespace produces no glyph commands.
	Fully transparent backgrounds are skipped.
	"""
	commands = []
	for _, current in walk(pane):
		if colors.is_visible(current.color):
			commands.append(DrawRect(transform.apply_rect(current.rect), current.color))

		contents = current.contents
		if not isinstance(contents, Text):
			continue
		format = contents.format
		for char, x, y, _line in text_positions(current, metrics):
			if char.isspace():
				continue
			tx, ty = transform.apply(x, y)
			commands.append(DrawGlyph(char, tx, ty, format.font, format.font_size, format.color))
	return commands

# -------
# Rendering
# -------

class Renderer:
	"""Drawing collaborator. Backends override both methods.

	Errors raised by a renderer propagate out of `draw` unchanged.
	"""

	def fill_rect(self, rect: Rect, color: colors.Color) -> None:
		raise NotImplementedError("Renderers must implement fill_rect")

	def draw_glyph(self, char: str, position: tuple[float, float], font: FontObject, size: float, color: colors.Color) -> None:
		raise NotImplementedError("Renderers must implement draw_glyph")

	def execute(self, command: DrawCommand) -> None:
		if isinstance(command, DrawRect):
			self.fill_rect(command.rect, command.color)
		elif isinstance(command, DrawGlyph):
			self.draw_glyph(command.char, command.position, command.font, command.size, command.color)
		else:
			raise TypeError(f"Unknown draw command: {type(command).__name__}")


class RecordingRenderer(Renderer):
	"""Keeps every command it is asked to draw. Handy for tests and debugging."""

	def __init__(self):
		self.commands: list[DrawCommand] = []

	def fill_rect(self, rect, color):
		self.commands.append(DrawRect(rect, color))

	def draw_glyph(self, char, position, font, size, color):
		self.commands.append(DrawGlyph(char, position[0], position[1], font, size, color))


def draw(pane: Pane, metrics: MetricsProvider, renderer: Renderer, transform: Transform = IDENTITY) -> int:
	"""Draw a resolved tree with `renderer`. Returns the number of commands executed."""
	commands = display_list(pane, metrics, transform)
	for command in commands:
		renderer.execute(command)
	logger.debug("Drew %d commands with %s", len(commands), type(renderer).__name__)
	return len(commands)
