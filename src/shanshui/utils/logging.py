"""Logging utilities for shanshui.

Every submodule logs through a child of the ``shanshui`` logger, which is
silent until configured.  :func:`configure_logging` switches console output
on or off for the whole package; :func:`get_logger` builds a stdout handler
from a profile's ``logging`` section for callers that want structured lines.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any, Mapping, Optional

_TEXT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# Global project-wide logger -------------------------------------------------
logger = logging.getLogger("shanshui")
logger.addHandler(logging.NullHandler())


class _JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base = {"level": record.levelname, "name": record.name, "message": record.getMessage()}
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            base.update(extra)
        return json.dumps(base, ensure_ascii=False)


def _formatter(fmt: str) -> logging.Formatter:
    return _JSONFormatter() if fmt == "json" else logging.Formatter(_TEXT_FORMAT)


def configure_logging(enabled: bool = True, level: int = logging.INFO) -> None:
    """Configure the package logger.

    Parameters
    ----------
    enabled:
        Install a console ``StreamHandler`` when ``True``; silence the
        package entirely when ``False``.
    level:
        Threshold for the console handler.  Per-shape messages are emitted at
        ``DEBUG`` so a whole scene does not flood the console.
    """
    # repeated calls replace, never stack, handlers
    logger.handlers.clear()
    if not enabled:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.CRITICAL + 1)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(_formatter("text"))
    logger.addHandler(handler)
    logger.setLevel(level)


def get_logger(name: str, cfg: Optional[Mapping[str, Any]] = None) -> logging.Logger:
    """Return logger ``name`` with a stdout handler built from ``cfg``.

    ``cfg`` is a profile dict (``{"logging": {"level": .., "format": ..}}``);
    the ``SHANSHUI_LOG_LEVEL`` and ``SHANSHUI_LOG_FORMAT`` environment
    variables take precedence.  A logger that already has handlers is
    returned untouched.
    """
    section = (cfg or {}).get("logging") or {}
    level = os.getenv("SHANSHUI_LOG_LEVEL", section.get("level", "INFO"))
    fmt = os.getenv("SHANSHUI_LOG_FORMAT", section.get("format", "text"))

    lg = logging.getLogger(name)
    if not lg.handlers:
        lg.setLevel(getattr(logging, str(level).upper(), logging.INFO))
        h = logging.StreamHandler(stream=sys.stdout)
        h.setFormatter(_formatter(fmt))
        lg.addHandler(h)
    return lg


__all__ = ["logger", "configure_logging", "get_logger"]
