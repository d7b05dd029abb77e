"""Scene composers: one function per chunk kind, keyed by tag."""
from typing import Callable, Dict

from ..svg.elements import Chunk
from .boat import boat_chunk
from .distmount import distmount_chunk
from .flatmount import flatmount_chunk
from .mount import mount_chunk
from .tree import tree_chunk
from .water import water_chunk

Composer = Callable[..., Chunk]

COMPOSERS: Dict[str, Composer] = {
    "mount": mount_chunk,
    "flatmount": flatmount_chunk,
    "distmount": distmount_chunk,
    "water": water_chunk,
    "boat": boat_chunk,
    "tree": tree_chunk,
}

__all__ = [
    "Composer",
    "COMPOSERS",
    "mount_chunk",
    "flatmount_chunk",
    "distmount_chunk",
    "water_chunk",
    "boat_chunk",
    "tree_chunk",
]
