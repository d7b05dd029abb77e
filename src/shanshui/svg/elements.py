"""Scene composition tree: leaf elements, composites and tagged chunks.

Every node exposes ``render() -> str``.  Composites hold leaf elements
only; adding a composite to another copies its leaves in order, so the
tree is flattened one level at a time and can never form a cycle.
Insertion order is render order.
"""
from __future__ import annotations

import html
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Iterator, List, Literal, Optional, Sequence, Tuple, get_args

from ..core.primitives import Point
from ..geometry.polytools import un_nan
from .attributes import format_points, render_attributes

ChunkTag = Literal["mount", "flatmount", "distmount", "water", "boat", "tree", "?"]
CHUNK_TAGS: Tuple[str, ...] = get_args(ChunkTag)

TRANSPARENT = "rgba(0,0,0,0)"


def _require_color(name: str, value: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{name} must be a non-empty color string, got {value!r}")
    return value


class Renderable(ABC):
    """Anything that serializes to a markup fragment."""

    @abstractmethod
    def render(self) -> str:
        ...


class Polyline(Renderable):
    """A styled open or closed polygon.

    ``x_offset``/``y_offset`` translate the points once at construction;
    non-finite points are replaced by the origin before they are stored.
    """

    def __init__(
        self,
        points: Sequence[Point],
        x_offset: float = 0.0,
        y_offset: float = 0.0,
        fill: str = TRANSPARENT,
        stroke: str = TRANSPARENT,
        stroke_width: float = 0.0,
        **attrs: Any,
    ):
        self.fill = _require_color("fill", fill)
        self.stroke = _require_color("stroke", stroke)
        self.stroke_width = stroke_width
        self.attrs: Dict[str, Any] = dict(attrs)
        moved = [Point(p.x + x_offset, p.y + y_offset) for p in points]
        self.points: Tuple[Point, ...] = tuple(un_nan(moved))

    @property
    def style(self) -> Dict[str, Any]:
        return {"fill": self.fill, "stroke": self.stroke, "stroke_width": self.stroke_width}

    def render(self) -> str:
        attrs = render_attributes({"style": self.style, **self.attrs})
        return f"<polyline points='{format_points(self.points)}' {attrs}/>"

    def __repr__(self) -> str:
        return f"Polyline(n={len(self.points)}, fill={self.fill!r}, stroke={self.stroke!r})"


class Text(Renderable):
    """A text element; ``attrs`` carry position, anchor, transform and style."""

    def __init__(self, content: str, attrs: Optional[Dict[str, Any]] = None, **extra: Any):
        self.content = str(content)
        self.attrs: Dict[str, Any] = {**(attrs or {}), **extra}

    def render(self) -> str:
        attrs = render_attributes(self.attrs)
        opening = f"<text {attrs}>" if attrs else "<text>"
        return f"{opening}{html.escape(self.content, quote=False)}</text>"


class Composite(Renderable):
    """Ordered, flat list of leaf elements built by one generator call."""

    def __init__(self, elements: Iterable[Renderable] = ()):
        self._elements: List[Renderable] = []
        for e in elements:
            self.add(e)

    @staticmethod
    def _leaves(node: Renderable) -> List[Renderable]:
        if isinstance(node, Composite):
            return list(node._elements)
        if isinstance(node, Renderable):
            return [node]
        raise TypeError(f"cannot add {type(node).__name__} to a composite")

    def add(self, node: Renderable) -> "Composite":
        self._elements.extend(self._leaves(node))
        return self

    def add_first(self, node: Renderable) -> "Composite":
        """Prepend ``node`` so it renders beneath everything already added."""
        self._elements[:0] = self._leaves(node)
        return self

    @property
    def elements(self) -> Tuple[Renderable, ...]:
        return tuple(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Renderable]:
        return iter(tuple(self._elements))

    def render(self) -> str:
        return "".join(e.render() for e in self._elements)


class Chunk(Composite):
    """A tagged, anchored composite: one placed object in a scene."""

    def __init__(self, tag: ChunkTag, x: float, y: float, elements: Iterable[Renderable] = ()):
        if tag not in CHUNK_TAGS:
            raise ValueError(f"unknown chunk tag {tag!r}; expected one of {CHUNK_TAGS}")
        super().__init__(elements)
        self.tag = tag
        self.x = float(x)
        self.y = float(y)

    def __repr__(self) -> str:
        return f"Chunk(tag={self.tag!r}, x={self.x:g}, y={self.y:g}, n={len(self)})"


__all__ = [
    "ChunkTag",
    "CHUNK_TAGS",
    "TRANSPARENT",
    "Renderable",
    "Polyline",
    "Text",
    "Composite",
    "Chunk",
]
