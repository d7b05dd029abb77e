"""Shape brushes: strokes, blobs and branches."""
from .blob import generate_blob, generate_blob_points
from .branch import generate_branch, grow_branch_levels, grow_branches
from .config import BlobCfg, BranchCfg, StrokeCfg
from .stroke import expand, generate_stroke, stroke_points

__all__ = [
    "StrokeCfg",
    "BlobCfg",
    "BranchCfg",
    "stroke_points",
    "generate_stroke",
    "expand",
    "generate_blob_points",
    "generate_blob",
    "generate_branch",
    "grow_branch_levels",
    "grow_branches",
]
