import pytest

from shanshui.core import Point
from shanshui.svg.attributes import format_number, kebab_case, render_attributes, render_style
from shanshui.svg.elements import CHUNK_TAGS, Chunk, Composite, Polyline, Text


def test_kebab_case():
    assert kebab_case("strokeWidth") == "stroke-width"
    assert kebab_case("stroke_width") == "stroke-width"
    assert kebab_case("textAnchor") == "text-anchor"
    assert kebab_case("fill") == "fill"


def test_number_formatting():
    assert format_number(2) == "2"
    assert format_number(2.0) == "2"
    assert format_number(1.5) == "1.5"


def test_style_and_attributes():
    assert render_style({"fill": "red", "strokeWidth": 2, "opacity": None}) == "fill:red;stroke-width:2"
    out = render_attributes({"style": {"fontSize": 12}, "textAnchor": "middle", "x": 3.0})
    assert out == "style='font-size:12' text-anchor='middle' x='3'"


def test_attribute_values_are_escaped():
    out = render_attributes({"title": "it's <a&b>", "style": {"fontFamily": "'Noto'"}})
    assert out == "title='it&#x27;s &lt;a&amp;b&gt;' style='font-family:&#x27;Noto&#x27;'"


def test_polyline_render():
    el = Polyline([Point(0, 0), Point(1.26, 2.04)], fill="red", stroke="blue", stroke_width=2)
    assert el.render() == "<polyline points='0.0,0.0 1.3,2.0' style='fill:red;stroke:blue;stroke-width:2'/>"


def test_polyline_offsets_and_extra_attributes():
    el = Polyline([Point(1, 1)], x_offset=10, y_offset=-1, strokeLinecap="round")
    assert el.points == (Point(11, 0),)
    assert el.render().endswith("stroke-linecap='round'/>")


def test_polyline_guards_non_finite_points():
    el = Polyline([Point(float("nan"), 5), Point(1, 1)])
    assert el.render().startswith("<polyline points='0.0,0.0 1.0,1.0'")


@pytest.mark.parametrize("bad", ["", "   "])
def test_polyline_rejects_empty_color(bad):
    with pytest.raises(ValueError):
        Polyline([Point(0, 0)], fill=bad)
    with pytest.raises(ValueError):
        Polyline([Point(0, 0)], stroke=bad)


def test_text_render():
    t = Text("hi", {"x": 10, "fontSize": 12, "textAnchor": "middle"})
    assert t.render() == "<text x='10' font-size='12' text-anchor='middle'>hi</text>"
    assert Text("a<b", style={"fontSize": 3}).render() == "<text style='font-size:3'>a&lt;b</text>"


def test_composite_flattens_and_keeps_order():
    a = Polyline([Point(0, 0)], fill="a")
    b = Polyline([Point(0, 0)], fill="b")
    c = Polyline([Point(0, 0)], fill="c")
    inner = Composite([b, c])
    outer = Composite().add(a).add(inner)
    assert len(outer) == 3
    assert list(outer) == [a, b, c]
    assert outer.render() == a.render() + b.render() + c.render()


def test_composite_add_first():
    a = Polyline([Point(0, 0)], fill="a")
    bg = Polyline([Point(0, 0)], fill="bg")
    comp = Composite([a])
    comp.add_first(bg)
    assert comp.elements == (bg, a)


def test_composite_rejects_non_renderable():
    with pytest.raises(TypeError):
        Composite().add("not an element")


def test_later_changes_to_child_composite_do_not_leak():
    inner = Composite([Polyline([Point(0, 0)], fill="x")])
    outer = Composite([inner])
    inner.add(Polyline([Point(1, 1)], fill="y"))
    assert len(outer) == 1


def test_chunk():
    el = Polyline([Point(0, 0), Point(1, 1)], fill="red")
    ch = Chunk("mount", 10, 20, [el])
    assert ch.tag == "mount" and ch.x == 10 and ch.y == 20
    assert ch.render() == el.render()
    assert "?" in CHUNK_TAGS
    with pytest.raises(ValueError):
        Chunk("castle", 0, 0)
