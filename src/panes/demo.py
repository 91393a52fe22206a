"""
Demo: build a small pane tree, resolve it and print (or render) its geometry.

Usage:
    python -m panes                        # Resolve at 400x300 and dump the rects
    python -m panes --fit                  # Size the tree to its text first
    python -m panes --png demo.png         # Also render with the Pillow backend
    python -m panes -v                     # Debug logging
"""

from __future__ import annotations

import argparse
import logging

from . import colors
from .draw import draw, dump_pane_rects, text_positions, walk
from .geometry import Orientation, Rect, Transform
from .metrics import MetricsProvider
from .pane import Pane
from .resolver import fit_text, resolve
from .text_format import TextFormat

logger = logging.getLogger(__name__)

SAMPLE_TEXT = ("Nice weather we are having, isn't it? It's such a beautiful day. "
	"The air is so fresh and the temperature is just right.")


def build_demo_tree(width=400, height=300) -> Pane:
	"""A header over a row of three differently justified text panes."""
	body = TextFormat(font_size=14)
	return (Pane()
		.with_rect(Rect(0, 0, width, height))
		.with_margin(5)
		.with_color(colors.BLACK)
		.with_orientation(Orientation.VERTICAL)
		.with_panes(
			("header", 1, Pane()
				.with_margin(5)
				.with_color(colors.BLUE)
				.with_text("Pane layout demo", TextFormat(font_size=24).centered().middle())),
			("body", 3, Pane()
				.with_orientation(Orientation.HORIZONTAL)
				.with_panes(
					Pane().with_margin(5).with_text(SAMPLE_TEXT, body.left()),
					Pane().with_margin(5).with_color(colors.GRAY).with_text(SAMPLE_TEXT, body.centered().middle()),
					Pane().with_margin(5).with_text(SAMPLE_TEXT, body.right().bottom()),
				)),
		))


def render_png(pane: Pane, path: str, glyphs) -> None:
	"""Render a resolved tree to a PNG, measuring and drawing with `glyphs`."""
	from PIL import Image, ImageDraw

	from .pillow_backend import ImageRenderer

	width, height = pane.rect.size
	if width <= 0 or height <= 0:
		raise ValueError(f"Cannot render a degenerate pane: {pane.rect!r}")
	# The image covers exactly the root pane, wherever it sits in layout space
	x, y = pane.rect.top_left
	image = Image.new("RGBA", (int(width + 0.5), int(height + 0.5)), colors.to_rgba8(colors.TRANSPARENT))
	count = draw(pane, glyphs, ImageRenderer(ImageDraw.Draw(image), glyphs), Transform.translation(-x, -y))
	image.save(path)
	print(f"Rendered {count} draw commands to {path}")


def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(description="Resolve a sample pane tree and show its geometry")
	parser.add_argument('--width', type=float, default=400, help="Root pane width (default: 400)")
	parser.add_argument('--height', type=float, default=300, help="Root pane height (default: 300)")
	parser.add_argument('--fit', action='store_true', help="Size the tree to its text before resolving")
	parser.add_argument('--png', metavar='PATH', help="Render the tree to a PNG using Pillow")
	parser.add_argument('-v', '--verbose', action='store_true', help="Enable debug logging")
	return parser.parse_args(argv)


def main(argv=None) -> int:
	args = parse_arguments(argv)
	logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
		format="%(levelname)s %(name)s: %(message)s")

	if args.png:
		# Lay out with the same font that will be drawn
		from .pillow_backend import PillowGlyphs
		metrics = PillowGlyphs.load_default()
	else:
		metrics = MetricsProvider()
	tree = build_demo_tree(args.width, args.height)
	tree = fit_text(tree, metrics) if args.fit else resolve(tree)

	print("Resolved layout")
	print("===============")
	print(dump_pane_rects(tree))

	text_panes = [pane for _, pane in walk(tree) if pane.text is not None]
	for pane in text_panes:
		positions = text_positions(pane, metrics)
		lines = 1 + max((position.line for position in positions), default=-1)
		print(f"{pane.text[:24]!r}: {len(positions)} characters on {lines} lines")

	if args.png:
		render_png(tree, args.png, metrics)
	return 0


if __name__ == "__main__":
	raise SystemExit(main())
