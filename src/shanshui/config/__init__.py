"""Profile configuration: pydantic schema, YAML loader and dataclass bridges."""
from .bridge import blob_cfg, branch_cfg, chunk_params, stroke_cfg
from .loader import DEFAULTS_PATH, load_profile
from .schema import Profile

__all__ = [
    "Profile",
    "DEFAULTS_PATH",
    "load_profile",
    "stroke_cfg",
    "blob_cfg",
    "branch_cfg",
    "chunk_params",
]
