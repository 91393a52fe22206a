"""
Color constants for pane backgrounds and text.

A color is an (r, g, b, a) tuple of floats in the range [0, 1].
"""

Color = tuple[float, float, float, float]

RED: Color = (1.0, 0.0, 0.0, 1.0)
ORANGE: Color = (1.0, 0.5, 0.0, 1.0)
YELLOW: Color = (1.0, 1.0, 0.0, 1.0)
GREEN: Color = (0.0, 1.0, 0.0, 1.0)
CYAN: Color = (0.0, 1.0, 1.0, 1.0)
BLUE: Color = (0.0, 0.0, 1.0, 1.0)
PURPLE: Color = (0.5, 0.0, 0.5, 1.0)
MAGENTA: Color = (1.0, 0.0, 1.0, 1.0)
BLACK: Color = (0.0, 0.0, 0.0, 1.0)
GRAY: Color = (0.5, 0.5, 0.5, 1.0)
GREY = GRAY
WHITE: Color = (1.0, 1.0, 1.0, 1.0)
TRANSPARENT: Color = (0.0, 0.0, 0.0, 0.0)


def to_rgba8(color: Color) -> tuple[int, int, int, int]:
	"""Convert a float color to 8-bit channels, clamping out-of-range values."""
	return tuple(int(round(min(max(channel, 0.0), 1.0) * 255)) for channel in color)


def is_visible(color: Color | None) -> bool:
	return color is not None and color[3] > 0
