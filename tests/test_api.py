import pytest
from pydantic import ValidationError

from shanshui import SCENE_KINDS, Chunk, Composite, generate_scene
from shanshui.core import PRNG, PerlinNoise
from shanshui.errors import UnknownKindError
from shanshui.scene.tree import tree_chunk

SMALL = {
    "water": {"width": 200, "clusters": 3},
    "distmount": {"length": 200, "height": 60},
    "mount": {"layers": 4, "samples": 20, "rocks": 2},
    "flatmount": {"layers": 3, "samples": 30},
    "boat": {"scale": 0.8},
    "tree": {"depth": 2},
}


def test_kinds():
    assert set(SCENE_KINDS) == {"mount", "flatmount", "distmount", "water", "boat", "tree"}


@pytest.mark.parametrize("kind", sorted(SMALL))
def test_each_kind_renders_reproducibly(kind):
    a = generate_scene("seed-1", kind, 100, 300, **SMALL[kind])
    b = generate_scene("seed-1", kind, 100, 300, **SMALL[kind])
    assert isinstance(a, Chunk) and a.tag == kind
    assert len(a) > 0
    assert a.render() == b.render()
    assert "nan" not in a.render()


def test_different_seeds_differ():
    a = generate_scene("a", "water", 0, 300, **SMALL["water"])
    b = generate_scene("b", "water", 0, 300, **SMALL["water"])
    assert a.render() != b.render()


def test_seed_is_required_without_generator():
    with pytest.raises(ValueError):
        generate_scene(None, "boat", 0, 0)
    chunk = generate_scene(None, "boat", 0, 0, prng=PRNG(3), noise=PerlinNoise())
    assert chunk.tag == "boat"


def test_unknown_kind():
    with pytest.raises(UnknownKindError) as exc:
        generate_scene(1, "castle", 0, 0)
    assert isinstance(exc.value, KeyError)
    assert "castle" in str(exc.value)


def test_unknown_parameter_is_rejected():
    with pytest.raises(ValidationError):
        generate_scene(1, "boat", 0, 0, sails=3)


def test_failed_call_leaves_scene_untouched():
    scene = Composite([generate_scene(1, "boat", 0, 0)])
    before = scene.render()
    with pytest.raises(ValidationError):
        scene.add(generate_scene(1, "boat", 0, 0, scale=-1))
    assert scene.render() == before


def test_boat_flip_mirrors_hull():
    right = generate_scene(4, "boat", 0, 0)
    left = generate_scene(4, "boat", 0, 0, flip=True)
    assert right.elements[0].points[1].x > 0
    assert left.elements[0].points[1].x < 0


def test_tree_leaves_only_on_terminal_twigs(prng, noise):
    chunk = tree_chunk(prng, noise, 0, 0, depth=2, fork_probability=1.0)
    leaves = [el for el in chunk if el.fill == "rgba(100,100,100,0.6)"]
    assert len(chunk) == 7 + 4
    assert len(leaves) == 4
