from copy import deepcopy
from typing import Any, Mapping


def deep_update(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict:
    """Merge *override* into a deep copy of *base*.

    Where both sides hold a mapping under the same key the two are merged
    key by key; anything else in *override* replaces the value outright.
    Neither argument is modified, so profiles can be layered repeatedly.
    """
    merged = {key: deepcopy(value) for key, value in base.items()}
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(value, Mapping) and isinstance(current, Mapping):
            merged[key] = deep_update(current, value)
        else:
            merged[key] = deepcopy(value)
    return merged
