"""Serialize independent layers of chunks, optionally in parallel.

Layer markup is pure string work over finished trees, so layers can be
rendered on worker threads; results are reassembled by index.
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence, Tuple

from ..utils.logging import logger as _root_logger
from .elements import Renderable

logger = _root_logger.getChild("layers")

Layer = Tuple[str, Sequence[Renderable]]


def render_layer(chunks: Sequence[Renderable], index: int, tag: str, frame: int = 0) -> str:
    """Wrap the chunks' markup, one per line, in a ``<g>`` group."""
    body = "".join(f"{c.render()}\n" for c in chunks)
    return f'<g id="frame{frame}-layer{index}-{tag}">{body}</g>'


def render_layers(
    layers: Sequence[Layer],
    max_workers: Optional[int] = None,
    frame: int = 0,
) -> List[str]:
    """Render ``(tag, chunks)`` layers; output order matches input order."""
    if max_workers is not None and max_workers < 1:
        raise ValueError(f"max_workers must be >= 1, got {max_workers}")

    def _job(item: Tuple[int, Layer]) -> str:
        index, (tag, chunks) = item
        return render_layer(chunks, index, tag, frame)

    jobs = list(enumerate(layers))
    if max_workers == 1 or len(jobs) <= 1:
        out = [_job(j) for j in jobs]
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            out = list(pool.map(_job, jobs))
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("rendered %d layer(s), %d chars", len(out), sum(len(s) for s in out))
    return out


__all__ = ["Layer", "render_layer", "render_layers"]
