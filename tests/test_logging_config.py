import json
import logging

import pytest

from shanshui.core import PRNG
from shanshui.utils.logging import configure_logging, get_logger, logger


@pytest.fixture
def restore_logger():
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_configure_logging_toggles(restore_logger):
    configure_logging(True, logging.DEBUG)
    assert logger.level == logging.DEBUG
    assert any(isinstance(h, logging.StreamHandler) for h in logger.handlers)
    configure_logging(True, logging.DEBUG)
    assert len(logger.handlers) == 1
    configure_logging(False)
    assert logger.level > logging.CRITICAL


def test_get_logger_json(monkeypatch, capsys):
    monkeypatch.delenv("SHANSHUI_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SHANSHUI_LOG_FORMAT", raising=False)
    lg = get_logger("shanshui.test.json", {"logging": {"level": "INFO", "format": "json"}})
    lg.propagate = False
    lg.info("hello")
    line = capsys.readouterr().out.strip()
    assert json.loads(line) == {"level": "INFO", "name": "shanshui.test.json", "message": "hello"}


def test_get_logger_env_override(monkeypatch):
    monkeypatch.setenv("SHANSHUI_LOG_LEVEL", "DEBUG")
    lg = get_logger("shanshui.test.env", {"logging": {"level": "ERROR"}})
    assert lg.level == logging.DEBUG


def test_wall_clock_seed_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="shanshui")
    PRNG()
    assert any("not reproducible" in r.getMessage() for r in caplog.records)
