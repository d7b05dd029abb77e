from .attributes import format_points, kebab_case, render_attributes, render_style
from .elements import CHUNK_TAGS, Chunk, ChunkTag, Composite, Polyline, Renderable, Text
from .layers import render_layer, render_layers

__all__ = [
    "Renderable",
    "Polyline",
    "Text",
    "Composite",
    "Chunk",
    "ChunkTag",
    "CHUNK_TAGS",
    "kebab_case",
    "render_style",
    "render_attributes",
    "format_points",
    "render_layer",
    "render_layers",
]
