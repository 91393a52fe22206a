"""Geometry value types shared by the layout engine.

Sizes and positions are stored in axis-indexable form ([x, y] and [width, height])
so that most of the engine can be written once with `axis` and `1 - axis` patterns.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, NamedTuple

# -------
# Orientation
# -------

class Orientation(IntEnum):
	"""Axis along which a pane's children are laid out.

	The value is the index of the main axis: 0 for x/width, 1 for y/height.
	"""
	HORIZONTAL = 0
	VERTICAL = 1

	@property
	def axis(self) -> int:
		return int(self)

	@property
	def cross_axis(self) -> int:
		return 1 - int(self)

# -------
# Rect
# -------

class Rect(tuple):
	"""An immutable rectangle: (x, y, width, height), origin top-left, y down."""

	__slots__ = ()

	def __new__(cls, x=0, y=0, width=0, height=0):
		return tuple.__new__(cls, (x, y, width, height))

	@classmethod
	def coerce(cls, value) -> Rect:
		"""Accept a Rect or any 4-sequence."""
		if isinstance(value, Rect):
			return value
		x, y, width, height = value
		return cls(x, y, width, height)

	x = property(lambda self: self[0])
	y = property(lambda self: self[1])
	width = property(lambda self: self[2])
	height = property(lambda self: self[3])

	left = x
	top = y

	@property
	def right(self):
		return self[0] + self[2]

	@property
	def bottom(self):
		return self[1] + self[3]

	@property
	def top_left(self) -> tuple:
		return (self[0], self[1])

	@property
	def size(self) -> tuple:
		return (self[2], self[3])

	def pos(self, axis: int):
		return self[axis]

	def extent(self, axis: int):
		return self[2 + axis]

	def with_top_left(self, top_left) -> Rect:
		return Rect(top_left[0], top_left[1], self[2], self[3])

	def with_size(self, size) -> Rect:
		return Rect(self[0], self[1], size[0], size[1])

	def with_axis(self, axis: int, pos, extent) -> Rect:
		"""Return a copy with position and extent replaced along one axis."""
		values = list(self)
		values[axis] = pos
		values[2 + axis] = extent
		return Rect(*values)

	def inset(self, margin) -> Rect:
		"""Shrink by `margin` on all four sides.

		If the margin does not fit, the result collapses to zero extent on that axis,
		centred in the original rect, instead of going negative.
		"""
		values = list(self)
		for axis in (0, 1):
			extent = self[2 + axis]
			if extent >= 2 * margin:
				values[axis] = self[axis] + margin
				values[2 + axis] = extent - 2 * margin
			else:
				values[axis] = self[axis] + max(extent, 0) / 2
				values[2 + axis] = 0
		return Rect(*values)

	def split(self, axis: int, weights: Iterable) -> list[Rect]:
		"""Split along `axis` into segments proportional to `weights`.

		Boundaries are computed cumulatively and the last segment ends exactly on the
		far edge, so segments never leave gaps or overlap.
		"""
		weights = list(weights)
		if not weights:
			return []
		total = sum(weights)
		start = self[axis]
		extent = self[2 + axis]
		end = start + extent

		rects = []
		offset = start
		cumulative = 0
		for i, weight in enumerate(weights):
			cumulative += weight
			if i == len(weights) - 1:
				boundary = end
			else:
				boundary = start + extent * cumulative / total
			rects.append(self.with_axis(axis, offset, boundary - offset))
			offset = boundary
		return rects

	def __repr__(self):
		return f"Rect({self[0]}, {self[1]}, {self[2]}, {self[3]})"

# -------
# Affine transform
# -------

class Transform(NamedTuple):
	"""A 2D affine transform mapping (x, y) to (a*x + b*y + c, d*x + e*y + f)."""
	a: float = 1.0
	b: float = 0.0
	c: float = 0.0
	d: float = 0.0
	e: float = 1.0
	f: float = 0.0

	@classmethod
	def translation(cls, dx, dy) -> Transform:
		return cls(1.0, 0.0, dx, 0.0, 1.0, dy)

	@classmethod
	def scaling(cls, sx, sy=None) -> Transform:
		return cls(sx, 0.0, 0.0, 0.0, sx if sy is None else sy, 0.0)

	def apply(self, x, y) -> tuple:
		return (self.a * x + self.b * y + self.c, self.d * x + self.e * y + self.f)

	def apply_rect(self, rect: Rect) -> Rect:
		"""Transform a rect, returning the bounding box of its transformed corners.

		Exact for translations and scalings; for rotations and shears the result is
		the axis-aligned box around the rotated shape.
		"""
		corners = [
			self.apply(rect.left, rect.top),
			self.apply(rect.right, rect.top),
			self.apply(rect.left, rect.bottom),
			self.apply(rect.right, rect.bottom),
		]
		xs = [corner[0] for corner in corners]
		ys = [corner[1] for corner in corners]
		return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))


IDENTITY = Transform()
