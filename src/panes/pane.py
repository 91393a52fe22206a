"""
The pane tree: rectangles that contain either nothing, a run of text, or child panes.

Panes are immutable values built with `with_*` methods, each returning a new pane with
one field replaced. Geometry is assigned by `panes.resolver.resolve`, which returns a
new tree rather than mutating the one it is given.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Callable, Iterable, NamedTuple, Union

from . import colors
from .geometry import Orientation, Rect
from .text_format import TextFormat

# -------
# Contents
# -------

@dataclass(frozen=True)
class Empty:
	"""No contents; the pane only paints its background."""


@dataclass(frozen=True)
class Text:
	"""A run of text laid out in the pane's inner rectangle."""
	text: str
	format: TextFormat = field(default_factory=TextFormat)


class Child(NamedTuple):
	"""A child pane together with its share of the parent and an optional name."""
	pane: 'Pane'
	weight: float = 1
	name: str | None = None


@dataclass(frozen=True)
class Children:
	"""Child panes splitting the inner rectangle along the parent's orientation."""
	entries: tuple[Child, ...] = ()

	def __post_init__(self):
		names = set()
		for entry in self.entries:
			if not isinstance(entry.weight, (int, float)) or entry.weight <= 0:
				raise ValueError(f"Child weight must be a positive number, got {entry.weight!r}")
			if entry.name is not None:
				if entry.name in names:
					raise ValueError(f"Duplicate child name: {entry.name!r}")
				names.add(entry.name)

	@property
	def panes(self) -> tuple[Pane, ...]:
		return tuple(entry.pane for entry in self.entries)

	@property
	def weights(self) -> tuple[float, ...]:
		return tuple(entry.weight for entry in self.entries)

	def index_of(self, name: str) -> int:
		for i, entry in enumerate(self.entries):
			if entry.name == name:
				return i
		raise KeyError(name)


Contents = Union[Empty, Text, Children]

EMPTY = Empty()


ChildSpec = Union['Pane', Child, tuple, str]

def _child_entry(spec: ChildSpec) -> Child:
	"""Normalize one argument of `Pane.with_panes` into a Child entry.

	Accepted forms: a Pane, a Child, (weight, Pane), (name, weight, Pane), or a
	bare name which creates an empty pane.
	"""
	if isinstance(spec, Child):
		return spec
	if isinstance(spec, Pane):
		return Child(spec)
	if isinstance(spec, str):
		return Child(Pane(), 1, spec)
	if isinstance(spec, tuple):
		if len(spec) == 2 and isinstance(spec[1], Pane):
			return Child(spec[1], spec[0])
		if len(spec) == 3 and isinstance(spec[2], Pane):
			return Child(spec[2], spec[1], spec[0])
	raise TypeError(f"Unsupported child specification: {spec!r}. "
					f"Use a Pane, (weight, Pane), (name, weight, Pane) or a name.")

# -------
# Pane
# -------

@dataclass(frozen=True)
class Pane:
	"""A rectangular region in the layout tree.

	A pane has exactly one kind of contents. Setting text replaces any children and
	setting children replaces any text.
	"""
	rect: Rect = Rect()
	margin: float = 0
	color: colors.Color | None = None
	orientation: Orientation = Orientation.HORIZONTAL
	contents: Contents = EMPTY

	def __post_init__(self):
		if not isinstance(self.rect, Rect):
			object.__setattr__(self, 'rect', Rect.coerce(self.rect))
		assert self.margin >= 0, f"Margin cannot be negative: {self.margin}"

	# --- builders

	def with_rect(self, rect) -> Pane:
		return replace(self, rect=Rect.coerce(rect))

	def with_size(self, size) -> Pane:
		return replace(self, rect=self.rect.with_size(size))

	def with_top_left(self, top_left) -> Pane:
		return replace(self, rect=self.rect.with_top_left(top_left))

	def with_margin(self, margin: float) -> Pane:
		return replace(self, margin=margin)

	def with_color(self, color: colors.Color | None) -> Pane:
		return replace(self, color=None if color is None else tuple(color))

	def with_orientation(self, orientation: Orientation) -> Pane:
		return replace(self, orientation=Orientation(orientation))

	def with_contents(self, contents: Contents) -> Pane:
		if not isinstance(contents, (Empty, Text, Children)):
			raise TypeError(f"Unknown pane contents: {type(contents).__name__}")
		return replace(self, contents=contents)

	def with_no_contents(self) -> Pane:
		return replace(self, contents=EMPTY)

	def with_text(self, text: str, format: TextFormat | None = None) -> Pane:
		return replace(self, contents=Text(text, TextFormat() if format is None else format))

	def with_panes(self, *children: ChildSpec) -> Pane:
		"""Replace the contents with child panes.

		Each child may be given as a Pane, (weight, Pane), (name, weight, Pane), a
		Child, or a bare name for an empty placeholder pane.
		"""
		if len(children) == 1 and isinstance(children[0], list):
			children = tuple(children[0])
		return replace(self, contents=Children(tuple(map(_child_entry, children))))

	# --- queries

	@property
	def inner_rect(self) -> Rect:
		"""The rect left for contents once the margin is removed."""
		return self.rect.inset(self.margin)

	@property
	def children(self) -> tuple[Pane, ...]:
		if isinstance(self.contents, Children):
			return self.contents.panes
		return ()

	@property
	def text(self) -> str | None:
		return self.contents.text if isinstance(self.contents, Text) else None

	@property
	def text_format(self) -> TextFormat | None:
		return self.contents.format if isinstance(self.contents, Text) else None

	def _child_index(self, key: int | str) -> int:
		if not isinstance(self.contents, Children):
			raise KeyError(key) if isinstance(key, str) else IndexError(key)
		if isinstance(key, str):
			return self.contents.index_of(key)
		index = range(len(self.contents.entries))[key]  # raises IndexError
		return index

	def __getitem__(self, key: int | str) -> Pane:
		return self.contents.entries[self._child_index(key)].pane

	def __len__(self) -> int:
		return len(self.children)

	def map_child(self, key: int | str, func: Callable[[Pane], Pane]) -> Pane:
		"""Return a copy with one child replaced by `func(child)`."""
		index = self._child_index(key)
		entries = list(self.contents.entries)
		entries[index] = entries[index]._replace(pane=func(entries[index].pane))
		return replace(self, contents=Children(tuple(entries)))

	def replace_children(self, panes: Iterable[Pane]) -> Pane:
		"""Swap in new child panes, keeping each entry's weight and name."""
		entries = tuple(entry._replace(pane=pane) for entry, pane in zip(self.contents.entries, panes, strict=True))
		return replace(self, contents=Children(entries))
