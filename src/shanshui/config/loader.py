"""Profile loader: packaged defaults, optional user file, then overrides."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..utils.dict_merge import deep_update
from .schema import Profile

__all__ = ["DEFAULTS_PATH", "load_profile", "read_yaml"]

DEFAULTS_PATH = Path(__file__).with_name("defaults.yaml")


def read_yaml(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise TypeError(f"Top-level YAML at {path} must be a mapping")
    return data


def load_profile(
    path: Optional[str | Path] = None,
    *,
    overrides: Optional[Dict[str, Any]] = None,
) -> Profile:
    """Return the validated :class:`Profile`.

    ``path`` names a user YAML merged over the packaged defaults; a missing
    user file is an error.  ``overrides`` is merged last.
    """
    cfg = read_yaml(DEFAULTS_PATH)
    if path is not None:
        if not Path(path).exists():
            raise FileNotFoundError(f"profile not found: {path}")
        cfg = deep_update(cfg, read_yaml(path))
    if overrides:
        cfg = deep_update(cfg, overrides)
    return Profile.model_validate(cfg)
