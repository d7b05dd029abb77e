"""Bridge validated profile sections to the brushes' frozen dataclasses."""
from __future__ import annotations

from typing import Any, Dict, Optional

from ..brushes.config import BlobCfg, BranchCfg, StrokeCfg
from .loader import load_profile
from .schema import Profile


def _profile(profile: Optional[Profile]) -> Profile:
    return profile if profile is not None else load_profile()


def stroke_cfg(profile: Optional[Profile] = None, **changes: Any) -> StrokeCfg:
    return StrokeCfg(**{**_profile(profile).brushes.stroke.model_dump(), **changes})


def blob_cfg(profile: Optional[Profile] = None, **changes: Any) -> BlobCfg:
    return BlobCfg(**{**_profile(profile).brushes.blob.model_dump(), **changes})


def branch_cfg(profile: Optional[Profile] = None, **changes: Any) -> BranchCfg:
    return BranchCfg(**{**_profile(profile).brushes.branch.model_dump(), **changes})


def chunk_params(kind: str, profile: Optional[Profile] = None) -> Dict[str, Any]:
    """Keyword defaults for the scene composer of ``kind``."""
    section = getattr(_profile(profile).chunks, kind, None)
    if section is None:
        raise KeyError(kind)
    return section.model_dump()


__all__ = ["stroke_cfg", "blob_cfg", "branch_cfg", "chunk_params"]
