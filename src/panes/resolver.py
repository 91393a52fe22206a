"""
Layout resolution for pane trees.

`resolve` assigns every pane its rectangle top-down: each pane takes its outer rect,
insets it by its margin, and splits the result among its children along its
orientation. `fit_text` first measures the tree bottom-up so that every text pane gets
at least the room its wrapped text needs, growing the root when necessary, and
`fit_fonts` picks the largest font size that fits each text pane's rect.

Resolution uses an explicit stack so that very deep trees cannot exhaust the
interpreter's recursion limit.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable

from . import constants
from .geometry import Orientation, Rect
from .metrics import MetricsProvider
from .pane import Children, Empty, Pane, Text
from .text_layout import fit_font_size, text_size, wrap

logger = logging.getLogger(__name__)


def child_rects(pane: Pane, rect: Rect | None = None) -> list[Rect]:
	"""Rects a pane gives its children when its own rect is `rect`."""
	rect = pane.rect if rect is None else Rect.coerce(rect)
	contents = pane.contents
	if isinstance(contents, Children):
		return rect.inset(pane.margin).split(pane.orientation.axis, contents.weights)
	elif isinstance(contents, (Text, Empty)):
		return []
	raise TypeError(f"Unknown pane contents: {type(contents).__name__}")


class _Frame:
	__slots__ = ('pane', 'rect', 'segments', 'resolved')

	def __init__(self, pane: Pane, rect: Rect):
		self.pane = pane
		self.rect = rect
		self.segments = list(zip(pane.children, child_rects(pane, rect)))
		self.resolved = []

	def finish(self, adjust: Callable[[Pane], Pane] | None) -> Pane:
		placed = replace(self.pane, rect=self.rect)
		if adjust is not None:
			placed = adjust(placed)
		if self.segments:
			placed = placed.replace_children(self.resolved)
		return placed


def _rebuild(pane: Pane, rect: Rect, adjust: Callable[[Pane], Pane] | None = None) -> tuple[Pane, int]:
	"""Place a whole tree inside `rect`, post-order, without recursion.

	`adjust` is called on every pane once its own rect is assigned and before its
	resolved children are attached.
	"""
	count = 0
	stack = [_Frame(pane, rect)]
	while True:
		frame = stack[-1]
		done = len(frame.resolved)
		if done < len(frame.segments):
			child, segment = frame.segments[done]
			stack.append(_Frame(child, segment))
			continue

		stack.pop()
		placed = frame.finish(adjust)
		count += 1
		if not stack:
			return placed, count
		stack[-1].resolved.append(placed)


def resolve(pane: Pane, outer_rect: Rect | None = None) -> Pane:
	"""Return a copy of the tree with every pane's rect resolved.

	Args:
		pane: Root of the tree
		outer_rect: Rect for the root; defaults to the root's current rect

	Children of a pane partition its inner (margin-adjusted) rect along its
	orientation in proportion to their weights, in order. Degenerate rects are
	passed down unchanged rather than rejected.
	"""
	rect = pane.rect if outer_rect is None else Rect.coerce(outer_rect)
	resolved, count = _rebuild(pane, rect)
	logger.debug("Resolved %d panes into %r", count, rect)
	return resolved

# -------
# Fitting
# -------

def content_size(pane: Pane, width: float, metrics: MetricsProvider) -> tuple[float, float]:
	"""Minimal outer (width, height) of a pane whose outer width is `width`.

	Text is wrapped at the inner width it would be given. A container whose children
	demand more than their share of the width reports the grown width, and its height
	is large enough that its weighted split gives every child the height it needs.
	"""
	margins = 2 * pane.margin
	inner_width = max(width - margins, 0)
	contents = pane.contents

	if isinstance(contents, Empty):
		return (margins, margins)

	elif isinstance(contents, Text):
		lines = wrap(contents.text, contents.format, inner_width, metrics)
		text_width, text_height = text_size(lines, contents.format, metrics)
		return (text_width + margins, text_height + margins)

	elif isinstance(contents, Children):
		if not contents.entries:
			return (margins, margins)

		total = sum(contents.weights)
		shares = [weight / total for weight in contents.weights]
		children = contents.panes

		if pane.orientation == Orientation.HORIZONTAL:
			def measure_children(inner):
				return [content_size(child, inner * share, metrics) for child, share in zip(children, shares)]
			sizes = measure_children(inner_width)
			needed = max(size[0] / share for size, share in zip(sizes, shares))
			if needed > inner_width:
				inner_width = needed
				sizes = measure_children(inner_width)
			inner_height = max(size[1] for size in sizes)
		else:
			def measure_children(inner):
				return [content_size(child, inner, metrics) for child in children]
			sizes = measure_children(inner_width)
			needed = max(size[0] for size in sizes)
			if needed > inner_width:
				inner_width = needed
				sizes = measure_children(inner_width)
			inner_height = max(size[1] / share for size, share in zip(sizes, shares))

		return (needed + margins, inner_height + margins)

	raise TypeError(f"Unknown pane contents: {type(contents).__name__}")


def fit_text(pane: Pane, metrics: MetricsProvider, *, shrink: bool = True) -> Pane:
	"""Size the tree to its text and resolve it.

	The root keeps its width unless some text cannot fit in it (a word wider than its
	pane), in which case the root grows. Its height becomes exactly the height the
	text needs, or, with `shrink=False`, only grows when the text needs more.

	No text pane is ever left smaller than the bounding box of its wrapped text.
	"""
	rect = pane.rect
	width, height = content_size(pane, rect.width, metrics)
	new_width = max(rect.width, width)
	if new_width != rect.width:
		# Wider panes wrap into fewer lines, so heights must be measured again
		width, height = content_size(pane, new_width, metrics)
	new_height = height if shrink else max(rect.height, height)

	logger.debug("Fitted %r to text: %sx%s", rect, new_width, new_height)
	return resolve(pane, rect.with_size((new_width, new_height)))


def fit_fonts(pane: Pane, metrics: MetricsProvider, *, minimum: int = constants.MIN_FONT_SIZE,
		maximum: int | None = None) -> Pane:
	"""Resolve the tree and resize every text pane's font to fill its inner rect.

	Each font size is the largest that still fits the wrapped text inside the pane,
	bounded by `minimum` and `maximum` (which defaults to each pane's inner height).
	"""
	def fit_font(placed: Pane) -> Pane:
		contents = placed.contents
		if not isinstance(contents, Text):
			return placed
		size = fit_font_size(contents.text, contents.format, placed.inner_rect, metrics, minimum, maximum)
		return placed.with_text(contents.text, contents.format.with_font_size(size))

	resolved, count = _rebuild(pane, pane.rect, fit_font)
	logger.debug("Fitted fonts of %d panes", count)
	return resolved
