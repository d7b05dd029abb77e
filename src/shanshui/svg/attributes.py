"""Attribute serialization for markup elements.

Keys are accepted in camelCase or snake_case and written kebab-case; a
``style`` mapping collapses into a ``k:v;k:v`` string.  Values are HTML-escaped
inside single quotes.
"""
from __future__ import annotations

import html
import re
from typing import Any, Iterable, Mapping

from ..core.primitives import Point

_CAMEL = re.compile(r"(?<!^)(?=[A-Z])")


def kebab_case(key: str) -> str:
    """``strokeWidth`` / ``stroke_width`` -> ``stroke-width``."""
    return _CAMEL.sub("-", key).replace("_", "-").lower()


def format_number(value: float) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, int):
        return str(value)
    f = float(value)
    if f.is_integer():
        return str(int(f))
    return repr(f)


def format_value(value: Any) -> str:
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)


def render_style(style: Mapping[str, Any]) -> str:
    return ";".join(
        f"{kebab_case(k)}:{format_value(v)}" for k, v in style.items() if v is not None
    )


def render_attributes(attrs: Mapping[str, Any]) -> str:
    parts = []
    for k, v in attrs.items():
        if v is None:
            continue
        text = render_style(v) if k == "style" and isinstance(v, Mapping) else format_value(v)
        parts.append(f"{kebab_case(k)}='{html.escape(text, quote=True)}'")
    return " ".join(parts)


def format_points(points: Iterable[Point]) -> str:
    """Space separated ``x,y`` pairs with one decimal place."""
    return " ".join(f"{p.x:.1f},{p.y:.1f}" for p in points)


__all__ = [
    "kebab_case",
    "format_number",
    "format_value",
    "render_style",
    "render_attributes",
    "format_points",
]
