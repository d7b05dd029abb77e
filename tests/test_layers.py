import pytest

from shanshui.core import Point
from shanshui.svg.elements import Chunk, Polyline
from shanshui.svg.layers import render_layer, render_layers


def _chunk(tag, fill):
    return Chunk(tag, 0, 0, [Polyline([Point(0, 0), Point(1, 1)], fill=fill)])


def test_render_layer_wraps_group():
    ch = _chunk("mount", "red")
    out = render_layer([ch], 2, "mount")
    assert out == f'<g id="frame0-layer2-mount">{ch.render()}\n</g>'


def test_render_layers_preserves_order():
    layers = [(f"t{i}", [_chunk("water", f"rgb({i},{i},{i})")]) for i in range(12)]
    inline = render_layers(layers, max_workers=1, frame=3)
    pooled = render_layers(layers, max_workers=4, frame=3)
    assert inline == pooled
    for i, text in enumerate(pooled):
        assert text.startswith(f'<g id="frame3-layer{i}-t{i}">')
        assert f"rgb({i},{i},{i})" in text


def test_render_layers_empty_and_invalid():
    assert render_layers([]) == []
    with pytest.raises(ValueError):
        render_layers([("a", [])], max_workers=0)
